"""
Tests for normalization.education.
"""
from __future__ import annotations

import pytest

from representantes.inference import infer_education_from_profession
from representantes.model import NORMALIZED_LEVELS, SIMPLIFIED_BY_NORMALIZED, EducationLevels
from representantes.normalization import (
    EDUCATION_RULES,
    education_explanation,
    map_legacy_education_level,
    match_education_rule,
    normalize_education,
)

SAMPLE_TEXTS = [
    "Licenciado en Derecho",
    "Doctor en Economía",
    "Grado en Economía y Máster en Finanzas",
    "FP Grado Superior en Administración",
    "Ciclo Formativo de Grado Medio",
    "Ingeniero Técnico Industrial",
    "Ingeniero de Caminos, Canales y Puertos",
    "Bachillerato Elemental",
    "BUP y COU",
    "EGB",
    "Sin estudios",
    "No consta",
    "Curso de cocina",
    "",
]


class TestNormalizeEducation:
    """Tests for normalize_education."""

    @pytest.mark.parametrize("text,normalized,simplified", [
        ("Licenciado en Derecho", "Licenciatura", "Universitaria"),
        ("Licenciada en Medicina y Cirugía", "Licenciatura", "Universitaria"),
        ("Doctor en Economía", "Doctorado", "Universitaria"),
        ("Doctorado en Ciencias Políticas", "Doctorado", "Universitaria"),
        ("MBA por IESE", "Master", "Universitaria"),
        ("Grado en Periodismo", "Grado", "Universitaria"),
        ("Estudios universitarios de Derecho", "Grado", "Universitaria"),
        ("Diplomado en Magisterio", "Grado", "Universitaria"),
        ("Ingeniero de Caminos, Canales y Puertos", "Licenciatura", "Universitaria"),
        ("Técnico Superior en Informática", "FP_Grado_Superior", "Postobligatoria"),
        ("FP2 Electricidad", "FP_Grado_Superior", "Postobligatoria"),
        ("Ciclo Formativo de Grado Medio", "FP_Grado_Medio", "Postobligatoria"),
        ("Formación Profesional de primer grado", "FP_Grado_Medio", "Postobligatoria"),
        ("Bachillerato", "Bachillerato", "Postobligatoria"),
        ("BUP y COU", "Bachillerato", "Postobligatoria"),
        ("EGB", "ESO", "Obligatoria"),
        ("Graduado Escolar", "ESO", "Obligatoria"),
        ("Sin estudios", "ESO", "Obligatoria"),
    ])
    def test_known_texts(self, text, normalized, simplified):
        """Test classification of typical education texts."""
        levels = normalize_education(text)

        assert levels.normalized == normalized
        assert levels.simplified == simplified
        assert levels.original == text

    def test_accents_and_case_ignored(self):
        """Test that accents and upper case do not change the result."""
        assert normalize_education("MÁSTER EN GESTIÓN PÚBLICA").normalized == "Master"
        assert normalize_education("master en gestion publica").normalized == "Master"

    def test_highest_attainment_wins(self):
        """Test that compound text resolves to the highest level it mentions."""
        levels = normalize_education("Grado en Economía y Máster en Finanzas")

        assert levels.normalized == "Master"

    def test_equal_priority_earlier_rule_wins(self):
        """Test that Master (listed before Licenciatura) wins a tie."""
        rule = match_education_rule("Licenciado en Derecho y Máster en Derecho Europeo")

        assert rule.rule_id == "master"
        assert normalize_education("Licenciado en Derecho y Máster en Derecho Europeo").normalized == "Master"

    def test_vocational_grado_is_not_university(self):
        """Test that 'FP Grado Superior' never becomes the university Grado."""
        levels = normalize_education("FP Grado Superior en Administración")

        assert levels.normalized == "FP_Grado_Superior"
        assert levels.simplified == "Postobligatoria"

    def test_tecnico_downgrades_engineering(self):
        """Test that technical engineering and architecture titles map to Grado."""
        assert normalize_education("Ingeniero Técnico Industrial").normalized == "Grado"
        assert normalize_education("Arquitecta Técnica").normalized == "Grado"
        assert normalize_education("Arquitecto").normalized == "Licenciatura"

    def test_bachillerato_elemental_is_compulsory(self):
        """Test that pre-1970 Bachillerato Elemental maps to ESO."""
        levels = normalize_education("Bachillerato Elemental")

        assert levels.normalized == "ESO"
        assert levels.simplified == "Obligatoria"

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_missing_text_is_no_data(self, text):
        """Test that missing text yields the canonical no-data triple."""
        assert normalize_education(text) == EducationLevels.no_data()

    def test_no_consta_text(self):
        """Test the explicit 'No consta' marker."""
        levels = normalize_education("No consta")

        assert levels.normalized == "No_consta"
        assert levels.simplified == "Obligatoria"

    def test_unclassifiable_text_keeps_original(self):
        """Test that unmatched text defaults to No_consta but keeps the text."""
        levels = normalize_education("Curso de cocina")

        assert levels.original == "Curso de cocina"
        assert levels.normalized == "No_consta"
        assert levels.simplified == "Obligatoria"

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_idempotent(self, text):
        """Test that normalizing the original text again gives the same result."""
        first = normalize_education(text)

        assert normalize_education(first.original) == first

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_simplified_follows_normalized(self, text):
        """Test that the simplified tier is always the mapped one."""
        levels = normalize_education(text)

        assert levels.normalized in NORMALIZED_LEVELS
        assert levels.simplified == SIMPLIFIED_BY_NORMALIZED[levels.normalized]


class TestEducationRules:
    """Tests for the rule table itself."""

    def test_rule_ids_unique(self):
        rule_ids = [r.rule_id for r in EDUCATION_RULES]

        assert len(rule_ids) == len(set(rule_ids))

    def test_rule_targets_consistent(self):
        for rule in EDUCATION_RULES:
            assert rule.simplified == SIMPLIFIED_BY_NORMALIZED[rule.normalized]

    def test_no_match_returns_none(self):
        assert match_education_rule("Curso de cocina") is None
        assert match_education_rule(None) is None


class TestHelpers:
    """Tests for explanation and legacy mapping helpers."""

    def test_explanation(self):
        assert education_explanation("Master") == "Máster universitario"
        assert education_explanation("Unknown") == "Desconocido"

    @pytest.mark.parametrize("legacy,expected", [
        ("Universitario", "Grado"),
        ("Universitario_inferido", "Grado"),
        ("FP_Tecnico", "FP_Grado_Superior"),
        ("Secundario", "ESO"),
        ("Estudios_incompletos", "ESO"),
        ("No_consta", "No_consta"),
        (None, "No_consta"),
        ("Something else", "No_consta"),
    ])
    def test_legacy_mapping(self, legacy, expected):
        assert map_legacy_education_level(legacy) == expected


class TestClassifierProperties:
    """Properties shared by the education and profession classifiers."""

    def test_doctorate_beats_licenciatura(self):
        assert normalize_education("Doctor en Medicina, Licenciado en Derecho").normalized == "Doctorado"

    def test_bare_fp_grado_superior(self):
        assert normalize_education("FP Grado Superior").normalized == "FP_Grado_Superior"

    def test_engineering_with_and_without_tecnico(self):
        assert normalize_education("Ingeniero Técnico Industrial").normalized == "Grado"
        assert normalize_education("Ingeniero Industrial").normalized == "Licenciatura"

    @pytest.mark.parametrize("text", SAMPLE_TEXTS + [None, "???", "12345", "ñ" * 500])
    def test_total_and_deterministic(self, text):
        """Test that any text classifies without raising, identically every time."""
        assert normalize_education(text) == normalize_education(text)

    @pytest.mark.parametrize("text", SAMPLE_TEXTS + [None, "???"])
    def test_profession_inference_total(self, text):
        result = infer_education_from_profession(text)

        assert result is None or 0.0 < result.confidence <= 1.0
