from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from representantes.config import RepresentantesConfig
from representantes.model import Record
from .base import QualityCheck, get_check_registry
from .checks import find_duplicates, missing_departure_fields
from .model import Coverage, QualityIssue, QualityReport

logger = logging.getLogger(__name__)


def build_checks(config: RepresentantesConfig) -> List[QualityCheck]:
    """
    Instantiate every registered check with its enabled flag from config.

    Checks that take a threshold get the configured inconsistency threshold.
    """
    checks: List[QualityCheck] = []
    for check_id, check_cls in get_check_registry().items():
        kwargs = {'enabled': config.check_enabled(check_id)}
        if 'threshold' in check_cls.__dataclass_fields__:
            kwargs['threshold'] = config.inconsistency_threshold
        checks.append(check_cls(**kwargs))
    return checks


def compute_coverage(records: Sequence[Record]) -> Coverage:
    education_complete = sum(1 for r in records if r.has_education)
    profession_complete = sum(1 for r in records if r.has_profession)
    both_complete = sum(1 for r in records if r.has_education and r.has_profession)
    return Coverage(
        education_complete=education_complete,
        education_missing=len(records) - education_complete,
        profession_complete=profession_complete,
        profession_missing=len(records) - profession_complete,
        both_complete=both_complete,
    )


def validate_data_quality(
    records: Sequence[Record],
    config: Optional[RepresentantesConfig] = None,
) -> QualityReport:
    """
    Validate a collection of records and build the quality report.

    Conflicts and departure issues share the 'conflicts' bucket (sources or
    metadata disagree); inconsistencies go to 'suspicious' (a single source
    looks implausible).

    Args:
        records: Snapshot of records. Not modified.
        config: Policy configuration; defaults apply when omitted.

    Returns:
        QualityReport: Counts, coverage, issues and duplicate groups.
    """
    config = config or RepresentantesConfig()
    records = list(records)

    buckets: Dict[str, List[QualityIssue]] = {'conflicts': [], 'suspicious': []}
    for check in build_checks(config):
        if not check.enabled:
            logger.debug(f"Skipping disabled check: {check.check_id}")
            continue
        found = check.run(records)
        logger.debug(f"Check {check.check_id}: {len(found)} issues")
        buckets[check.bucket].extend(found)

    report = QualityReport(
        total=len(records),
        unique_names=len({r.name_key for r in records}),
        active=sum(1 for r in records if r.is_active),
        baja=sum(1 for r in records if r.is_departed),
        baja_missing_metadata=sum(1 for r in records if r.is_departed and missing_departure_fields(r)),
        coverage=compute_coverage(records),
        conflicts=buckets['conflicts'],
        suspicious=buckets['suspicious'],
        duplicates=find_duplicates(records),
    )
    logger.info(f"Validated {report.total} records: {len(report.conflicts)} conflicts, "
                f"{len(report.suspicious)} suspicious, {len(report.duplicates)} duplicate groups")
    return report


def _percent(part: int, total: int) -> str:
    return f"{(part / total * 100):.1f}%" if total else "n/a"


def log_quality_report(report: QualityReport, max_items: int = 5) -> None:
    """Write a readable summary of the report to the log at INFO level."""
    coverage = report.coverage
    logger.info("Data quality report")
    logger.info(f"  Total entries: {report.total} (unique names: {report.unique_names})")
    logger.info(f"  Active: {report.active}, baja: {report.baja} "
                f"(missing metadata: {report.baja_missing_metadata})")
    logger.info(f"  Education: {coverage.education_complete}/{report.total} "
                f"({_percent(coverage.education_complete, report.total)})")
    logger.info(f"  Profession: {coverage.profession_complete}/{report.total} "
                f"({_percent(coverage.profession_complete, report.total)})")
    logger.info(f"  Both complete: {coverage.both_complete}/{report.total} "
                f"({_percent(coverage.both_complete, report.total)})")

    for title, issues in (("Conflicts", report.conflicts), ("Suspicious data", report.suspicious)):
        if not issues:
            logger.info(f"  No {title.lower()} found")
            continue
        logger.info(f"  {title}: {len(issues)}")
        for issue in issues[:max_items]:
            logger.info(f"    - {issue.nombre_completo}: {issue.issue}")
        if len(issues) > max_items:
            logger.info(f"    ... and {len(issues) - max_items} more")
