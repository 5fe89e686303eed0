"""
records.py - Computed identity fields, filtering and lookup over records.

EnrichedRecord wraps a Record with the fields the rest of the system
addresses it by: a URL slug, a legislature-scoped id and the party colour.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Any, Iterable, List, Optional, Sequence

from unidecode import unidecode

from representantes.model import LEGISLATURES, Record
from representantes.parties import get_party_color

logger = logging.getLogger(__name__)

__all__ = [
    'generate_slug',
    'generate_id',
    'EnrichedRecord',
    'enrich_records',
    'RecordFilters',
    'filter_records',
    'find_by_slug',
    'find_by_id',
    'unique_values',
]

SLUG_INVALID_RE = re.compile(r"[^a-z0-9\s-]")
SLUG_SPACE_RE = re.compile(r"\s+")
SLUG_DASH_RE = re.compile(r"-+")


def generate_slug(nombre: str) -> str:
    """
    URL-safe slug from a name.

    >>> generate_slug("Abascal Conde, Santiago")
    'abascal-conde-santiago'
    """
    slug = unidecode(nombre or "").lower()
    slug = SLUG_INVALID_RE.sub("", slug).strip()
    slug = SLUG_SPACE_RE.sub("-", slug)
    return SLUG_DASH_RE.sub("-", slug)


def generate_id(legislature: str, camara: str, slug: str) -> str:
    """Unique id from legislature, chamber and slug, e.g. 'xv-c-abascal-conde-santiago'."""
    if legislature not in LEGISLATURES:
        raise ValueError(f"Unknown legislature {legislature!r}; expected one of {', '.join(LEGISLATURES)}")
    prefix = 'c' if camara == 'Congreso' else 's'
    return f"{legislature.lower()}-{prefix}-{slug}"


@dataclass(frozen=True)
class EnrichedRecord:
    """
    A Record plus its computed fields.

    Attributes:
        record (Record): The underlying record.
        id (str): Legislature-scoped identifier.
        slug (str): URL slug derived from the name.
        partido_color (str): Party colour for charts.
    """
    record: Record
    id: str
    slug: str
    partido_color: str

    # Identity helpers (delegated)
    @property
    def nombre_completo(self) -> str:
        return self.record.nombre_completo

    @property
    def camara(self) -> str:
        return self.record.camara

    @property
    def partido(self) -> str:
        return self.record.partido

    @property
    def circunscripcion(self) -> str:
        return self.record.circunscripcion

    @property
    def education_levels(self):
        return self.record.education_levels

    @property
    def profession_category(self) -> str:
        return self.record.profession_category

    def to_dict(self) -> dict:
        return {**self.record.to_dict(), 'id': self.id, 'slug': self.slug, 'partido_color': self.partido_color}


def enrich_records(records: Iterable[Record], legislature: str) -> List[EnrichedRecord]:
    """Wrap each record with its slug, id and party colour."""
    enriched = []
    for record in records:
        slug = generate_slug(record.nombre_completo)
        enriched.append(EnrichedRecord(
            record=record,
            id=generate_id(legislature, record.camara, slug),
            slug=slug,
            partido_color=get_party_color(record.partido),
        ))
    logger.debug(f"Enriched {len(enriched)} records for legislature {legislature}")
    return enriched


@dataclass(frozen=True)
class RecordFilters:
    """
    Criteria for filter_records. Unset criteria do not filter.

    Attributes:
        camara: Exact chamber.
        partido: Exact party.
        nivel: Exact normalized education level.
        profesion_categoria: Exact profession category (see Record.profession_category).
        circunscripcion: Exact constituency.
        busqueda: Case-insensitive substring of name, party or constituency.
    """
    camara: Optional[str] = None
    partido: Optional[str] = None
    nivel: Optional[str] = None
    profesion_categoria: Optional[str] = None
    circunscripcion: Optional[str] = None
    busqueda: Optional[str] = None


def filter_records(records: Iterable[Any], filters: RecordFilters) -> List[Any]:
    """
    Filter Record or EnrichedRecord objects.

    Args:
        records: Records (plain or enriched) to filter.
        filters: Criteria; all set criteria must hold.

    Returns:
        List of matching records, original order kept.
    """
    result = list(records)
    if filters.camara:
        result = [r for r in result if r.camara == filters.camara]
    if filters.partido:
        result = [r for r in result if r.partido == filters.partido]
    if filters.nivel:
        result = [r for r in result if r.education_levels.normalized == filters.nivel]
    if filters.profesion_categoria:
        result = [r for r in result if r.profession_category == filters.profesion_categoria]
    if filters.circunscripcion:
        result = [r for r in result if r.circunscripcion == filters.circunscripcion]
    if filters.busqueda:
        term = filters.busqueda.lower()
        result = [
            r for r in result
            if term in r.nombre_completo.lower()
            or term in r.partido.lower()
            or term in r.circunscripcion.lower()
        ]
    return result


def find_by_slug(records: Sequence[EnrichedRecord], slug: str) -> Optional[EnrichedRecord]:
    return next((r for r in records if r.slug == slug), None)


def find_by_id(records: Sequence[EnrichedRecord], record_id: str) -> Optional[EnrichedRecord]:
    return next((r for r in records if r.id == record_id), None)


def unique_values(records: Iterable[Any], attr: str) -> List[Any]:
    """Sorted distinct values of an attribute, e.g. 'partido' or 'circunscripcion'."""
    return sorted({getattr(r, attr) for r in records})
