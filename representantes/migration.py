"""
migration.py - Converts legacy flat records to the multi-source schema.

Legacy documents carried a single estudios_raw / profesion_raw pair and a
'source' flag. Migration turns those into data_sources observations,
normalizes the education text and attaches a pending inference where the
profession implies an education the record lacks.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from representantes.inference import infer_education_from_profession
from representantes.model import DataSourceEntry, Record
from representantes.normalization import normalize_education

logger = logging.getLogger(__name__)


class MigrationError(ValueError):
    """Raised when migration would lose records or names."""


def _source_type(old: Dict[str, Any]) -> str:
    if old.get('source') == 'researched':
        return 'perplexity'
    return 'congreso' if old.get('camara') == 'Congreso' else 'senado'


def migrate_legacy_record(old: Dict[str, Any], default_extracted_at: str) -> Record:
    """
    Build a current-schema Record from a legacy flat document.

    Args:
        old: Legacy document.
        default_extracted_at: Timestamp for observations when the document has
            no last_researched date.

    Returns:
        Record: Migrated record.
    """
    estudios_raw: Optional[str] = old.get('estudios_raw')
    profesion_raw: Optional[str] = old.get('profesion_raw')
    extracted_at = old.get('last_researched') or default_extracted_at
    source = _source_type(old)

    data_sources = []
    if estudios_raw and estudios_raw.strip():
        data_sources.append(DataSourceEntry(
            source=source,
            field='estudios',
            raw_text=estudios_raw,
            extracted_at=extracted_at,
            extracted_value=old.get('estudios_nivel'),
        ))
    if profesion_raw and profesion_raw.strip():
        data_sources.append(DataSourceEntry(
            source=source,
            field='profesion',
            raw_text=profesion_raw,
            extracted_at=extracted_at,
            extracted_value=old.get('profesion_categoria'),
        ))

    inference = None
    if old.get('estudios_nivel') == 'No_consta' and profesion_raw and old.get('profesion_categoria'):
        inference = infer_education_from_profession(profesion_raw, old.get('profesion_categoria'))

    return Record(
        camara=old['camara'],
        nombre_completo=old['nombre_completo'],
        partido=old['partido'],
        grupo_parlamentario=old.get('grupo_parlamentario') or "",
        circunscripcion=old.get('circunscripcion') or "",
        fecha_alta=old.get('fecha_alta') or "",
        url_ficha=old.get('url_ficha') or "",
        data_sources=tuple(data_sources),
        education_levels=normalize_education(estudios_raw),
        education_inference=inference,
        estado=old.get('estado') or None,
        fecha_baja=old.get('fecha_baja') or None,
        sustituido_por=old.get('sustituido_por') or None,
        last_researched=old.get('last_researched') or None,
    )


def migrate_records(old_records: Sequence[Dict[str, Any]], default_extracted_at: str) -> List[Record]:
    """
    Migrate a whole legislature and check nothing was lost.

    Raises:
        MigrationError: If the record count or unique name count changes.
    """
    migrated = [migrate_legacy_record(old, default_extracted_at) for old in old_records]

    if len(migrated) != len(old_records):
        raise MigrationError(f"Data loss detected! Original: {len(old_records)}, migrated: {len(migrated)}")
    original_names = {old['nombre_completo'] for old in old_records}
    migrated_names = {r.nombre_completo for r in migrated}
    if original_names != migrated_names:
        raise MigrationError(
            f"Name mismatch! Original: {len(original_names)} unique names, migrated: {len(migrated_names)}"
        )

    logger.info(f"Migrated {len(migrated)} records: "
                f"{sum(1 for r in migrated if r.data_sources)} with data_sources, "
                f"{sum(1 for r in migrated if r.education_inference)} with education_inference")
    return migrated
