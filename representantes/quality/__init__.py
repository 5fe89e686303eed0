"""Quality module: data quality validation for a collection of records.

Detects:
    - Exact-name duplicates
    - Conflicts between data sources for the same field
    - Professions that imply an education the record lacks
    - Departed members missing exit metadata

Checks are registered QualityCheck subclasses; the validator runs every
enabled one and sorts issues into 'conflicts' and 'suspicious' buckets.

Example:
    >>> from representantes.quality import validate_data_quality
    >>> report = validate_data_quality(records)
    >>> for issue in report.conflicts:
    ...     print(f"{issue.severity}: {issue.issue}")
"""

from .model import QualityIssue
from .model import DuplicateCheck
from .model import Coverage
from .model import QualityReport
from .base import QualityCheck
from .base import register_check
from .base import get_check_registry
from .checks import ConflictingSourcesCheck
from .checks import InconsistentDataCheck
from .checks import DepartureMetadataCheck
from .checks import find_duplicates
from .checks import find_conflicting_sources
from .checks import find_inconsistent_data
from .checks import check_departure_metadata
from .validator import validate_data_quality
from .validator import log_quality_report

__all__ = [
    'QualityIssue',
    'DuplicateCheck',
    'Coverage',
    'QualityReport',
    'QualityCheck',
    'register_check',
    'get_check_registry',
    'ConflictingSourcesCheck',
    'InconsistentDataCheck',
    'DepartureMetadataCheck',
    'find_duplicates',
    'find_conflicting_sources',
    'find_inconsistent_data',
    'check_departure_metadata',
    'validate_data_quality',
    'log_quality_report',
]
