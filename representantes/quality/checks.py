"""
Built-in quality checks.

    - find_duplicates: records sharing a case-normalized full name
    - ConflictingSourcesCheck: observations of one field that disagree
    - InconsistentDataCheck: profession implies a degree but education is No_consta
    - DepartureMetadataCheck: departed records missing exit metadata
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
import logging
from typing import Dict, List, Optional, Sequence

from representantes.config import DEFAULT_INCONSISTENCY_THRESHOLD
from representantes.inference import infer_education_from_profession
from representantes.model import Record, NO_DATA_LEVEL
from .base import QualityCheck, register_check
from .model import DuplicateCheck, QualityIssue

logger = logging.getLogger(__name__)


def find_duplicates(records: Sequence[Record]) -> List[DuplicateCheck]:
    """
    Group records by exact (trimmed, case-insensitive) full name.

    Similar-but-different names are not grouped.

    Returns:
        List[DuplicateCheck]: One 'exact_match' group per name seen more than once.
    """
    groups: Dict[str, List[Record]] = defaultdict(list)
    for record in records:
        groups[record.name_key].append(record)

    duplicates = [
        DuplicateCheck(
            type="exact_match",
            entries=tuple(entries),
            confidence=1.0,
            notes=f'{len(entries)} entries with name "{name}"',
        )
        for name, entries in groups.items()
        if len(entries) > 1
    ]
    if duplicates:
        logger.debug(f"Found {len(duplicates)} duplicate name groups")
    return duplicates


@register_check
@dataclass
class ConflictingSourcesCheck(QualityCheck):
    """
    Flag fields whose observations carry different extracted values.

    Entries without an extracted value are ignored, so a single source with a
    value never conflicts with sources that only have raw text.
    """
    check_id: str = "conflicting_sources"
    bucket: str = "conflicts"

    def run(self, records: Sequence[Record]) -> List[QualityIssue]:
        issues: List[QualityIssue] = []
        for record in records:
            if len(record.data_sources) < 2:
                continue

            by_field = defaultdict(list)
            for source in record.data_sources:
                by_field[source.field].append(source)

            for field_name, sources in by_field.items():
                if len(sources) < 2:
                    continue
                # dict keeps first-seen order
                values = list(dict.fromkeys(s.extracted_value for s in sources if s.extracted_value))
                if len(values) > 1:
                    source_names = ", ".join(s.source for s in sources)
                    issues.append(QualityIssue(
                        nombre_completo=record.nombre_completo,
                        issue=(f"Sources disagree on {field_name}: {source_names} report different values "
                               f"({' vs '.join(values)})"),
                        severity="medium",
                        check_id=self.check_id,
                    ))
        return issues


@register_check
@dataclass
class InconsistentDataCheck(QualityCheck):
    """
    Flag records whose profession strongly implies an education they lack.

    Attributes:
        threshold: Minimum inference confidence to flag. The default (0.90)
            keeps the academic-title rule (0.70) and engineering (0.80) out.
    """
    check_id: str = "inconsistent_data"
    bucket: str = "suspicious"
    threshold: float = DEFAULT_INCONSISTENCY_THRESHOLD

    def run(self, records: Sequence[Record]) -> List[QualityIssue]:
        issues: List[QualityIssue] = []
        for record in records:
            if record.education_levels.normalized != NO_DATA_LEVEL:
                continue
            profession = record.profession_source
            if profession is None:
                continue

            inference = infer_education_from_profession(profession.raw_text)
            if inference and inference.confidence >= self.threshold:
                issues.append(QualityIssue(
                    nombre_completo=record.nombre_completo,
                    issue=(f'Profession "{profession.raw_text}" typically requires education '
                           f'({inference.inferred_education}) but education is {NO_DATA_LEVEL}'),
                    severity="medium",
                    check_id=self.check_id,
                ))
        return issues


@register_check
@dataclass
class DepartureMetadataCheck(QualityCheck):
    """Flag departed ('baja') records missing fecha_baja and/or sustituido_por."""
    check_id: str = "departure_metadata"
    bucket: str = "conflicts"

    def run(self, records: Sequence[Record]) -> List[QualityIssue]:
        issues: List[QualityIssue] = []
        for record in records:
            if not record.is_departed:
                continue
            missing = missing_departure_fields(record)
            if missing:
                issues.append(QualityIssue(
                    nombre_completo=record.nombre_completo,
                    issue=f'Marked as "baja" but missing: {", ".join(missing)}',
                    severity="low",
                    check_id=self.check_id,
                ))
        return issues


def missing_departure_fields(record: Record) -> List[str]:
    missing = []
    if not record.fecha_baja:
        missing.append("fecha_baja")
    if not record.sustituido_por:
        missing.append("sustituido_por")
    return missing


def find_conflicting_sources(records: Sequence[Record]) -> List[QualityIssue]:
    """Issues for records whose sources disagree on a field."""
    return ConflictingSourcesCheck().run(records)


def find_inconsistent_data(records: Sequence[Record], threshold: Optional[float] = None) -> List[QualityIssue]:
    """Issues for records whose profession implies an education marked No_consta."""
    if threshold is None:
        threshold = DEFAULT_INCONSISTENCY_THRESHOLD
    return InconsistentDataCheck(threshold=threshold).run(records)


def check_departure_metadata(records: Sequence[Record]) -> List[QualityIssue]:
    """Issues for departed records missing exit metadata."""
    return DepartureMetadataCheck().run(records)
