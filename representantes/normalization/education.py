"""
education.py - Maps free-text Spanish education descriptions to a three-level taxonomy.

Covers the historical Spanish systems:
    - Pre-1970 (Ley Moyano): Bachillerato Elemental, Enseñanza Primaria
    - 1970-1990 (Ley General de Educación): EGB, BUP, COU, FP1, FP2
    - 1990-2006 (LOGSE): ESO, Bachillerato, Ciclo Formativo
    - Pre-Bologna university: Licenciado, Diplomado, Ingeniero, Arquitecto
    - Post-Bologna: Grado, Máster, Doctorado

Every rule that matches is collected and the highest priority wins, so
compound text ("Grado en Economía y Máster en Finanzas") resolves to the
highest attainment it mentions. On equal priority the earlier rule wins.

Patterns run against folded text (lower-case, no accents, single spaces).
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Optional, Pattern, Tuple

from representantes.model import EducationLevels, NO_DATA_LEVEL, SIMPLIFIED_BY_NORMALIZED
from representantes.text import fold_text

logger = logging.getLogger(__name__)

__all__ = [
    'EducationRule',
    'EDUCATION_RULES',
    'match_education_rule',
    'normalize_education',
    'education_explanation',
    'map_legacy_education_level',
]


@dataclass(frozen=True)
class EducationRule:
    """
    One row of the education rule table.

    Attributes:
        rule_id (str): Identifier for auditing which rule fired.
        patterns (Tuple[Pattern, ...]): Any match fires the rule.
        normalized (str): Target normalized level.
        simplified (str): Target simplified tier.
        priority (int): Higher wins among all matching rules.
    """
    rule_id: str
    patterns: Tuple[Pattern, ...]
    normalized: str
    simplified: str
    priority: int

    def matches(self, folded: str) -> bool:
        return any(p.search(folded) for p in self.patterns)


def _rule(rule_id: str, patterns, normalized: str, priority: int) -> EducationRule:
    return EducationRule(
        rule_id=rule_id,
        patterns=tuple(re.compile(p) for p in patterns),
        normalized=normalized,
        simplified=SIMPLIFIED_BY_NORMALIZED[normalized],
        priority=priority,
    )


EDUCATION_RULES: Tuple[EducationRule, ...] = (
    # University, post-Bologna top tiers
    _rule("doctorado", [
        r"\bdoctorado\b",
        r"\bdoctora?\b",
        r"\bphd\b",
        r"\btesis\s+doctoral\b",
    ], "Doctorado", 9),
    _rule("master", [
        r"\bmaster\b",
        r"\bmba\b",
        r"\bpostgrado\b",
        r"\bposgrado\b",
    ], "Master", 8),

    # University, pre-Bologna. "Tecnico" downgrades engineering and
    # architecture titles to the diploma tier below.
    _rule("licenciatura", [
        r"\blicenciad[oa]\b",
        r"\blicenciatura\b",
        r"\bingenier[oa]\b(?!\s+tecnic[oa])",
        r"\barquitect[oa]\b(?!\s+tecnic[oa])",
    ], "Licenciatura", 8),
    _rule("diplomatura", [
        r"\bdiplomad[oa]\b",
        r"\bdiplomatura\b",
        r"\bingenier[oa]\s+tecnic[oa]\b",
        r"\barquitect[oa]\s+tecnic[oa]\b",
    ], "Grado", 6),

    # Vocational training
    _rule("fp_grado_superior", [
        r"\bciclo\s+formativo\s+de\s+grado\s+superior\b",
        r"\bfp\s*(?:de\s*)?(?:grado\s*)?superior\b",
        r"\bfp\s*2\b",
        r"\bformacion\s+profesional\s+de\s+segundo\s+grado\b",
        r"\btecnico\s+superior\b",
    ], "FP_Grado_Superior", 5),
    _rule("fp_grado_medio", [
        r"\bciclo\s+formativo\s+de\s+grado\s+medio\b",
        r"\bfp\s*(?:de\s*)?(?:grado\s*)?medio\b",
        r"\bfp\s*1\b",
        r"\bformacion\s+profesional\s+de\s+primer\s+grado\b",
        r"\btecnico\s+medio\b",
    ], "FP_Grado_Medio", 4),

    # University, post-Bologna Grado. The bare "grado" pattern must not fire
    # inside vocational phrasing ("FP Grado Superior", "Ciclo Formativo de
    # Grado Medio", "de primer grado"), whatever the priorities say.
    _rule("grado", [
        r"\bgrado\s+(?:en|universitario)",
        r"\bgraduado\s+en\b",
        r"(?<!fp )(?<!formativo de )(?<!primer )(?<!segundo )\bgrado\b(?!\s+(?:medio|superior))",
        r"\bestudios\s+universitarios",
        r"\buniversitarios?\b",
    ], "Grado", 7),

    _rule("bachillerato", [
        r"\bbachillerato\b",
        r"\bbup\b",
        r"\bcou\b",
        r"\bbachiller\b",
    ], "Bachillerato", 4),

    # Mandatory education outranks Bachillerato so that "Bachillerato
    # Elemental" (pre-1970, compulsory) is not read as the modern Bachillerato.
    _rule("eso", [
        r"\bbachillerato\s+elemental\b",
        r"\beso\b",
        r"\begb\b",
        r"\bgraduado\s+escolar\b",
        r"\beducacion\s+secundaria\s+obligatoria\b",
        r"\bensenanza\s+primaria\b",
    ], "ESO", 6),

    _rule("no_consta", [
        r"\bno\s+consta\b",
        r"\bsin\s+datos\b",
    ], "No_consta", 1),
    _rule("sin_estudios", [
        r"\bsin\s+estudios\b",
    ], "ESO", 2),
)


def match_education_rule(text: Optional[str]) -> Optional[EducationRule]:
    """
    Return the winning rule for a piece of education text.

    Args:
        text (Optional[str]): Raw education text.

    Returns:
        Optional[EducationRule]: Highest-priority matching rule, or None.
    """
    folded = fold_text(text)
    if not folded:
        return None
    best: Optional[EducationRule] = None
    for rule in EDUCATION_RULES:
        if rule.matches(folded) and (best is None or rule.priority > best.priority):
            best = rule
    return best


def normalize_education(text: Optional[str]) -> EducationLevels:
    """
    Normalize education text to the three-level representation.

    Never raises. Unclassifiable text becomes No_consta / Obligatoria but the
    original text is kept verbatim for later manual review.

    Args:
        text (Optional[str]): Raw education text from any source.

    Returns:
        EducationLevels: original, normalized and simplified levels.

    Example:
        >>> normalize_education('Licenciado en Derecho por la UCM').normalized
        'Licenciatura'
    """
    if not text or not text.strip():
        return EducationLevels.no_data()

    rule = match_education_rule(text)
    if rule is None:
        logger.debug(f"No education rule matched {text!r}")
        return EducationLevels(
            original=text,
            normalized=NO_DATA_LEVEL,
            simplified=SIMPLIFIED_BY_NORMALIZED[NO_DATA_LEVEL],
        )
    return EducationLevels(original=text, normalized=rule.normalized, simplified=rule.simplified)


_EXPLANATIONS = {
    "ESO": "Educación Secundaria Obligatoria (hasta 16 años)",
    "Bachillerato": "Bachillerato (16-18 años)",
    "FP_Grado_Medio": "Formación Profesional de Grado Medio",
    "FP_Grado_Superior": "Formación Profesional de Grado Superior",
    "Grado": "Grado universitario (4 años, sistema Bolonia)",
    "Licenciatura": "Licenciatura/Ingeniería (5 años, sistema pre-Bolonia)",
    "Master": "Máster universitario",
    "Doctorado": "Doctorado (PhD)",
    "No_consta": "No consta / Dato no disponible",
}


def education_explanation(normalized: str) -> str:
    """Human-readable description of a normalized level, for tooltips."""
    return _EXPLANATIONS.get(normalized, "Desconocido")


_LEGACY_LEVELS = {
    "Universitario": "Grado",
    "Universitario_inferido": "Grado",
    "FP_Tecnico": "FP_Grado_Superior",
    "Secundario": "ESO",
    "Estudios_incompletos": "ESO",
    "No_consta": "No_consta",
}


def map_legacy_education_level(legacy_level: Optional[str]) -> str:
    """Map a legacy estudios_nivel value to a normalized level."""
    return _LEGACY_LEVELS.get(legacy_level or "", NO_DATA_LEVEL)
