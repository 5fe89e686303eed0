"""
Tests for records.py and parties.py.
"""
from __future__ import annotations

import pytest

from representantes.parties import all_parties, get_party, get_party_color, load_parties
from representantes.records import (
    RecordFilters,
    enrich_records,
    filter_records,
    find_by_id,
    find_by_slug,
    generate_id,
    generate_slug,
    unique_values,
)


class TestSlugAndId:
    """Tests for generate_slug and generate_id."""

    @pytest.mark.parametrize("nombre,slug", [
        ("Abascal Conde, Santiago", "abascal-conde-santiago"),
        ("Núñez Feijóo, Alberto", "nunez-feijoo-alberto"),
        ("  Sánchez   Pérez-Castejón, Pedro ", "sanchez-perez-castejon-pedro"),
        ("", ""),
    ])
    def test_slug(self, nombre, slug):
        assert generate_slug(nombre) == slug

    def test_id(self):
        assert generate_id("XV", "Congreso", "abascal-conde-santiago") == "xv-c-abascal-conde-santiago"
        assert generate_id("I", "Senado", "x") == "i-s-x"

    def test_unknown_legislature(self):
        with pytest.raises(ValueError):
            generate_id("XIV", "Congreso", "x")


class TestEnrichAndFilter:
    """Tests for enrich_records and the lookup helpers."""

    @pytest.fixture
    def enriched(self, make_record):
        return enrich_records([
            make_record(nombre="Abascal Conde, Santiago", partido="VOX", circunscripcion="Madrid"),
            make_record(nombre="Pérez, Luis", partido="PSOE", camara="Senado", circunscripcion="Sevilla",
                        estudios="Licenciado en Derecho"),
            make_record(nombre="Ruiz, Eva", partido="Partido Desconocido", circunscripcion="Madrid",
                        profesion="Abogada", profesion_categoria="Profesional_liberal"),
        ], "XV")

    def test_enrich(self, enriched):
        first = enriched[0]

        assert first.id == "xv-c-abascal-conde-santiago"
        assert first.slug == "abascal-conde-santiago"
        assert first.partido_color == "#63BE21"
        assert enriched[2].partido_color == "#A0A0A0"

    def test_to_dict(self, enriched):
        data = enriched[1].to_dict()

        assert data['id'] == "xv-s-perez-luis"
        assert data['nombre_completo'] == "Pérez, Luis"

    def test_lookup(self, enriched):
        assert find_by_slug(enriched, "perez-luis").nombre_completo == "Pérez, Luis"
        assert find_by_id(enriched, "xv-c-ruiz-eva").partido == "Partido Desconocido"
        assert find_by_slug(enriched, "nobody") is None

    def test_filters(self, enriched):
        assert [r.slug for r in filter_records(enriched, RecordFilters(camara="Senado"))] == ["perez-luis"]
        assert len(filter_records(enriched, RecordFilters(circunscripcion="Madrid"))) == 2
        assert len(filter_records(enriched, RecordFilters(nivel="Licenciatura"))) == 1
        assert len(filter_records(enriched, RecordFilters(camara="Congreso", partido="VOX"))) == 1

    def test_profession_category_filter(self, enriched):
        """Test filtering by profession category, records without one count as No_consta."""
        assert [r.slug for r in filter_records(enriched, RecordFilters(profesion_categoria="Profesional_liberal"))] == [
            "ruiz-eva",
        ]
        assert len(filter_records(enriched, RecordFilters(profesion_categoria="No_consta"))) == 2
        assert filter_records([r.record for r in enriched], RecordFilters(profesion_categoria="Manual")) == []

    def test_search_is_case_insensitive(self, enriched):
        assert [r.slug for r in filter_records(enriched, RecordFilters(busqueda="SEVILLA"))] == ["perez-luis"]

    def test_no_filters(self, enriched):
        assert filter_records(enriched, RecordFilters()) == enriched

    def test_unique_values(self, enriched):
        assert unique_values(enriched, 'circunscripcion') == ["Madrid", "Sevilla"]


class TestParties:
    """Tests for parties.py."""

    def test_known_party(self):
        party = get_party("PP")

        assert party.nombre == "Partido Popular"
        assert get_party_color("PSOE") == "#E30613"

    def test_fallback(self):
        assert get_party("Nadie").id == "otros"

    def test_all_parties(self):
        assert "otros" not in {p.id for p in all_parties()}
        assert len(all_parties()) == 12

    def test_load_custom_file(self, tmp_path):
        parties_file = tmp_path / "parties.yaml"
        parties_file.write_text(
            "parties:\n"
            "  X:\n    id: x\n    nombre: Equis\n    nombre_corto: X\n    color: '#000000'\n"
            "fallback:\n  id: otros\n  nombre: Otros\n  nombre_corto: Otros\n  color: '#FFFFFF'\n",
            encoding="utf-8",
        )

        parties, fallback = load_parties(parties_file)

        assert parties["X"].color_secundario is None
        assert fallback.color == "#FFFFFF"

    def test_missing_fallback(self, tmp_path):
        parties_file = tmp_path / "parties.yaml"
        parties_file.write_text("parties: {}\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_parties(parties_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_parties(tmp_path / "missing.yaml")
