"""
Tests for the record schema in model.py.
"""
from __future__ import annotations

import pytest
from dataclasses import FrozenInstanceError

from representantes.model import DataSourceEntry, EducationInference, EducationLevels, Record


class TestDataSourceEntry:
    """Tests for DataSourceEntry."""

    def test_rejects_unknown_source(self):
        with pytest.raises(ValueError):
            DataSourceEntry(source="wikipedia", field="estudios", raw_text="x", extracted_at="2024-01-01")

    def test_rejects_unknown_field(self):
        with pytest.raises(ValueError):
            DataSourceEntry(source="congreso", field="edad", raw_text="x", extracted_at="2024-01-01")

    def test_has_text(self, make_source):
        assert make_source(raw_text="Abogado").has_text
        assert not make_source(raw_text="   ").has_text

    def test_to_dict_omits_empty_optionals(self, make_source):
        data = make_source(field="estudios", raw_text="Licenciado").to_dict()

        assert 'extracted_value' not in data
        assert 'citations' not in data

    def test_from_dict(self):
        entry = DataSourceEntry.from_dict({
            'source': 'perplexity',
            'field': 'estudios',
            'raw_text': 'Máster',
            'extracted_at': '2024-01-01',
            'citations': ['https://example.org'],
        })

        assert entry.citations == ('https://example.org',)
        assert entry.to_dict()['citations'] == ['https://example.org']


class TestEducationLevels:
    """Tests for EducationLevels."""

    def test_no_data(self):
        levels = EducationLevels.no_data()

        assert levels.original == "No consta"
        assert levels.normalized == "No_consta"
        assert levels.simplified == "Obligatoria"
        assert not levels.is_known

    def test_mismatched_tier_rejected(self):
        """Test that simplified must follow normalized."""
        with pytest.raises(ValueError):
            EducationLevels(original="Licenciado", normalized="Licenciatura", simplified="Obligatoria")

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            EducationLevels(original="x", normalized="Universitario", simplified="Universitaria")


class TestEducationInference:
    """Tests for EducationInference."""

    @pytest.mark.parametrize("confidence", [0.0, -0.1, 1.5])
    def test_confidence_range(self, confidence):
        with pytest.raises(ValueError):
            EducationInference(inferred_education="x", inference_rule="profession_requires_degree",
                               confidence=confidence)

    def test_status(self):
        inference = EducationInference(inferred_education="x", inference_rule="profession_requires_degree",
                                       confidence=0.9)

        assert inference.status == "pending"
        assert not inference.applied


class TestRecord:
    """Tests for Record."""

    def test_defaults(self, make_record):
        record = make_record()

        assert record.education_levels == EducationLevels.no_data()
        assert record.education_inference is None
        assert record.is_active
        assert not record.is_departed

    def test_invalid_camara(self):
        with pytest.raises(ValueError):
            Record(camara="Parlamento", nombre_completo="X", partido="PP")

    def test_immutable(self, make_record):
        record = make_record()

        with pytest.raises(FrozenInstanceError):
            record.partido = "PP"

    def test_add_source_appends(self, make_record, make_source):
        """Test that add_source returns a new record and keeps existing entries."""
        record = make_record(estudios="Licenciado en Derecho")
        new_entry = make_source(field="profesion", raw_text="Abogado", source="perplexity")

        updated = record.add_source(new_entry)

        assert len(record.data_sources) == 1
        assert updated.data_sources[:1] == record.data_sources
        assert updated.data_sources[-1] == new_entry

    def test_profession_text(self, make_record):
        record = make_record(profesion="Abogada")

        assert record.profession_text == "Abogada"
        assert record.has_profession

    def test_profession_source_skips_empty_text(self, make_record, make_source):
        record = make_record(data_sources=[
            make_source(field="profesion", raw_text=""),
            make_source(field="profesion", raw_text="Economista", source="perplexity"),
        ])

        assert record.first_source("profesion").raw_text == ""
        assert record.profession_source.source == "perplexity"
        assert record.profession_text == "Economista"

    def test_profession_category_default(self, make_record):
        assert make_record(profesion="Abogado").profession_category == "No_consta"

    def test_empty_profession_not_counted(self, make_record):
        assert not make_record(profesion="  ").has_profession

    def test_name_key(self, make_record):
        assert make_record(nombre="  García, Ana ").name_key == "garcía, ana"

    def test_dict_round_trip(self, make_record):
        record = make_record(estudios="Licenciado en Derecho", profesion="Abogado",
                             estado="baja", fecha_baja="2024-03-01")

        assert Record.from_dict(record.to_dict()) == record

    def test_to_dict_omits_unset_optionals(self, make_record):
        data = make_record().to_dict()

        for key in ('education_inference', 'estado', 'fecha_baja', 'sustituido_por', 'last_researched'):
            assert key not in data

    def test_from_dict_missing_levels(self):
        record = Record.from_dict({'camara': 'Senado', 'nombre_completo': 'X', 'partido': 'PP'})

        assert record.education_levels == EducationLevels.no_data()
        assert record.data_sources == ()
