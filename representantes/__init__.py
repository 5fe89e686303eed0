"""representantes package: classification and quality auditing for Spanish parliamentarian data."""

from representantes.config import RepresentantesConfig
from representantes.model import DataSourceEntry, EducationInference, EducationLevels, Record
from representantes.normalization import normalize_education
from representantes.inference import (
    infer_education_from_profession,
    needs_education_inference,
    review_inference,
)
from representantes.quality import (
    check_departure_metadata,
    find_conflicting_sources,
    find_duplicates,
    find_inconsistent_data,
    validate_data_quality,
)
from representantes.records import EnrichedRecord, enrich_records, filter_records, generate_slug
from representantes.research import ResearchResult, apply_research_result
from representantes.statistics import compute_stats

__all__ = [
    "DataSourceEntry",
    "EducationInference",
    "EducationLevels",
    "EnrichedRecord",
    "Record",
    "RepresentantesConfig",
    "ResearchResult",
    "apply_research_result",
    "check_departure_metadata",
    "compute_stats",
    "enrich_records",
    "filter_records",
    "find_conflicting_sources",
    "find_duplicates",
    "find_inconsistent_data",
    "generate_slug",
    "infer_education_from_profession",
    "needs_education_inference",
    "normalize_education",
    "review_inference",
    "validate_data_quality",
]
