"""
research.py - Applying AI-assisted research findings to records.

The research client itself (prompting, HTTP) lives outside this package; this
module decides who needs research and folds a finding into a record without
ever overwriting what is already known.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
import logging
from typing import Iterable, List, Optional, Tuple

from representantes.model import DataSourceEntry, PROFESSION_CATEGORIES, Record
from representantes.normalization import normalize_education

logger = logging.getLogger(__name__)

NO_DATA_PHRASES = (
    'no educational information found',
    'no information available',
    'could not find',
    'no data found',
    'information not available',
)


@dataclass(frozen=True)
class ResearchResult:
    """
    What a research pass found for one person.

    Attributes:
        estudios_raw: Education text found, if any.
        profesion_raw: Profession text found, if any.
        profesion_categoria: Profession category assigned to profesion_raw.
        citations: Source URLs backing the finding.
    """
    estudios_raw: Optional[str] = None
    profesion_raw: Optional[str] = None
    profesion_categoria: Optional[str] = None
    citations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResearchQueueItem:
    nombre_completo: str
    camara: str
    circunscripcion: str
    partido: str
    missing_estudios: bool
    missing_profesion: bool


def needs_education_research(record: Record) -> bool:
    return not record.has_education


def needs_profession_research(record: Record) -> bool:
    return not record.has_profession


def needs_research(record: Record) -> bool:
    return needs_education_research(record) or needs_profession_research(record)


def build_research_queue(records: Iterable[Record]) -> List[ResearchQueueItem]:
    """Queue items for every record missing education or profession."""
    return [
        ResearchQueueItem(
            nombre_completo=r.nombre_completo,
            camara=r.camara,
            circunscripcion=r.circunscripcion,
            partido=r.partido,
            missing_estudios=needs_education_research(r),
            missing_profesion=needs_profession_research(r),
        )
        for r in records
        if needs_research(r)
    ]


def is_no_data_response(content: str) -> bool:
    """Check if a research answer says nothing was found."""
    lower = (content or "").lower()
    return any(phrase in lower for phrase in NO_DATA_PHRASES)


def apply_research_result(record: Record, result: ResearchResult, extracted_at: Optional[str] = None) -> Record:
    """
    Fold a research finding into a record.

    Only fields the record does not know yet are filled: education only while
    it is No_consta, profession only while there is no profession text. Each
    accepted finding is appended as a 'perplexity' observation; existing
    observations and classifications are left exactly as they were.

    Args:
        record: Record to update.
        result: Research finding.
        extracted_at: ISO timestamp for the new observations; defaults to now (UTC).

    Returns:
        Record: Updated copy, or the same record when nothing was accepted.
    """
    extracted_at = extracted_at or datetime.now(timezone.utc).isoformat()
    updated = record

    if needs_education_research(record) and result.estudios_raw and result.estudios_raw.strip():
        levels = normalize_education(result.estudios_raw)
        if levels.is_known:
            updated = updated.add_source(DataSourceEntry(
                source="perplexity",
                field="estudios",
                raw_text=result.estudios_raw,
                extracted_at=extracted_at,
                extracted_value=levels.normalized,
                citations=tuple(result.citations),
            ))
            updated = replace(updated, education_levels=levels)
        else:
            logger.debug(f"Research education text for {record.nombre_completo} is unclassifiable")

    if needs_profession_research(record) and result.profesion_raw and result.profesion_raw.strip():
        categoria = result.profesion_categoria if result.profesion_categoria in PROFESSION_CATEGORIES else None
        updated = updated.add_source(DataSourceEntry(
            source="perplexity",
            field="profesion",
            raw_text=result.profesion_raw,
            extracted_at=extracted_at,
            extracted_value=categoria,
            citations=tuple(result.citations),
        ))

    if updated is record:
        return record
    logger.info(f"Applied research findings to {record.nombre_completo}")
    return replace(updated, last_researched=extracted_at)
