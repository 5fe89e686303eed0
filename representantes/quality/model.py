from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Tuple

from representantes.model import Record

Severity = Literal["low", "medium", "high"]
DuplicateType = Literal["exact_match", "similar_name", "same_person_both_chambers"]


@dataclass(frozen=True)
class QualityIssue:
    nombre_completo: str
    issue: str
    severity: Severity
    check_id: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {'nombre_completo': self.nombre_completo, 'issue': self.issue, 'severity': self.severity}


@dataclass(frozen=True)
class DuplicateCheck:
    """
    A group of records suspected to be the same person.

    Only 'exact_match' groups are produced; the other types are reserved for
    similar-name and cross-chamber detectors.
    """
    type: DuplicateType
    entries: Tuple[Record, ...]
    confidence: float
    notes: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'entries': [r.nombre_completo for r in self.entries],
            'confidence': self.confidence,
            'notes': self.notes,
        }


@dataclass(frozen=True)
class Coverage:
    education_complete: int = 0
    education_missing: int = 0
    profession_complete: int = 0
    profession_missing: int = 0
    both_complete: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'education_complete': self.education_complete,
            'education_missing': self.education_missing,
            'profession_complete': self.profession_complete,
            'profession_missing': self.profession_missing,
            'both_complete': self.both_complete,
        }


@dataclass
class QualityReport:
    """
    Data quality summary for a collection of records.

    Attributes:
        total: Number of records.
        unique_names: Distinct case-normalized names.
        active: Records with no status or status 'activo'.
        baja: Records with status 'baja'.
        baja_missing_metadata: Departed records missing fecha_baja or sustituido_por.
        coverage: Education / profession coverage counters.
        conflicts: Source disagreements followed by departure metadata issues.
        suspicious: Single-source plausibility gaps (profession implies missing education).
        duplicates: Exact-name duplicate groups.
    """
    total: int
    unique_names: int
    active: int
    baja: int
    baja_missing_metadata: int
    coverage: Coverage
    conflicts: List[QualityIssue] = field(default_factory=list)
    suspicious: List[QualityIssue] = field(default_factory=list)
    duplicates: List[DuplicateCheck] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': self.total,
            'unique_names': self.unique_names,
            'active': self.active,
            'baja': self.baja,
            'baja_missing_metadata': self.baja_missing_metadata,
            'coverage': self.coverage.to_dict(),
            'conflicts': [i.to_dict() for i in self.conflicts],
            'suspicious': [i.to_dict() for i in self.suspicious],
            'duplicates': [d.to_dict() for d in self.duplicates],
        }
