"""
Tests for research.py.
"""
from __future__ import annotations

from representantes.research import (
    ResearchResult,
    apply_research_result,
    build_research_queue,
    is_no_data_response,
    needs_research,
)

RESEARCHED_AT = "2024-05-01T09:00:00Z"


class TestResearchQueue:
    """Tests for deciding who needs research."""

    def test_needs_research(self, make_record):
        assert needs_research(make_record())
        assert needs_research(make_record(profesion="Abogado"))
        assert not needs_research(make_record(estudios="Licenciado en Derecho", profesion="Abogado"))

    def test_queue(self, make_record):
        queue = build_research_queue([
            make_record(nombre="A", profesion="Abogado"),
            make_record(nombre="B", estudios="Licenciado en Derecho", profesion="Abogado"),
        ])

        assert len(queue) == 1
        assert queue[0].nombre_completo == "A"
        assert queue[0].missing_estudios
        assert not queue[0].missing_profesion

    def test_no_data_response(self):
        assert is_no_data_response("Sorry, no educational information found for this person.")
        assert not is_no_data_response("Licenciado en Derecho por la Universidad de Salamanca")
        assert not is_no_data_response(None)


class TestApplyResearchResult:
    """Tests for apply_research_result."""

    def test_fills_missing_education(self, make_record):
        record = make_record(profesion="Abogado")
        result = ResearchResult(estudios_raw="Licenciado en Derecho", citations=("https://example.org",))

        updated = apply_research_result(record, result, RESEARCHED_AT)

        assert updated.education_levels.normalized == "Licenciatura"
        assert updated.data_sources[:1] == record.data_sources
        entry = updated.data_sources[-1]
        assert entry.source == "perplexity"
        assert entry.field == "estudios"
        assert entry.extracted_value == "Licenciatura"
        assert entry.citations == ("https://example.org",)
        assert updated.last_researched == RESEARCHED_AT

    def test_keeps_known_education(self, make_record):
        record = make_record(estudios="Bachillerato", profesion="Abogado")

        updated = apply_research_result(record, ResearchResult(estudios_raw="Doctor en Derecho"), RESEARCHED_AT)

        assert updated is record

    def test_unclassifiable_education_ignored(self, make_record):
        record = make_record(profesion="Abogado")

        updated = apply_research_result(record, ResearchResult(estudios_raw="Curso de cocina"), RESEARCHED_AT)

        assert updated is record

    def test_fills_missing_profession(self, make_record):
        record = make_record(estudios="Licenciado en Derecho")
        result = ResearchResult(profesion_raw="Abogada", profesion_categoria="Profesional_liberal")

        updated = apply_research_result(record, result, RESEARCHED_AT)

        assert updated.profession_text == "Abogada"
        assert updated.data_sources[-1].extracted_value == "Profesional_liberal"

    def test_invalid_category_dropped(self, make_record):
        result = ResearchResult(profesion_raw="Abogada", profesion_categoria="Lawyer")

        updated = apply_research_result(make_record(), result, RESEARCHED_AT)

        assert updated.data_sources[-1].extracted_value is None

    def test_keeps_known_profession(self, make_record):
        record = make_record(profesion="Abogado")

        updated = apply_research_result(record, ResearchResult(profesion_raw="Médico"), RESEARCHED_AT)

        assert updated is record
