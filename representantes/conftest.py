"""
Pytest fixtures shared by the representantes tests.
"""
from __future__ import annotations

import pytest

from representantes.config import RepresentantesConfig
from representantes.model import DataSourceEntry, EducationLevels, Record
from representantes.normalization import normalize_education

EXTRACTED_AT = "2024-01-15T10:00:00Z"


@pytest.fixture
def make_source():
    """Create a DataSourceEntry with sensible defaults."""
    def _create_source(field: str = "profesion", raw_text: str = "Abogado", source: str = "congreso",
                       extracted_value=None, extracted_at: str = EXTRACTED_AT, citations=()) -> DataSourceEntry:
        return DataSourceEntry(
            source=source,
            field=field,
            raw_text=raw_text,
            extracted_at=extracted_at,
            extracted_value=extracted_value,
            citations=tuple(citations),
        )

    return _create_source


@pytest.fixture
def make_record(make_source):
    """
    Create a Record.

    estudios / profesion add congreso observations; estudios is also
    normalized into education_levels.
    """
    def _create_record(nombre: str = "García López, Ana", camara: str = "Congreso", partido: str = "PSOE",
                       estudios=None, profesion=None, profesion_categoria=None,
                       data_sources=(), **kwargs) -> Record:
        sources = list(data_sources)
        if estudios is not None:
            sources.append(make_source(field="estudios", raw_text=estudios))
        if profesion is not None:
            sources.append(make_source(field="profesion", raw_text=profesion, extracted_value=profesion_categoria))
        if 'education_levels' not in kwargs:
            kwargs['education_levels'] = normalize_education(estudios) if estudios else EducationLevels.no_data()
        return Record(
            camara=camara,
            nombre_completo=nombre,
            partido=partido,
            circunscripcion=kwargs.pop('circunscripcion', "Madrid"),
            data_sources=tuple(sources),
            **kwargs,
        )

    return _create_record


@pytest.fixture
def default_config():
    """Default policy configuration."""
    return RepresentantesConfig()
