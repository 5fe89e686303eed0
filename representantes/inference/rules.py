"""
Profession -> education inference rules.

Rules are ordered from highest to lowest confidence and evaluated first-match:
they are curated so that in practice at most one applies.

Confidence bands:
    - 0.95: legal and medical professions, gated by a legal title
    - 0.80-0.90: plausible but needs review (engineering stays below 0.95
      because the title alone does not say which engineering)
    - 0.70: academic titles, a soft hint towards a doctorate
"""
from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Pattern, Tuple

from representantes.model import InferenceRuleKind


@dataclass(frozen=True)
class ProfessionEducationRule:
    rule_id: str
    profession_pattern: Pattern
    inferred_education: str
    confidence: float
    inference_rule: InferenceRuleKind = "profession_requires_degree"


def _rule(rule_id, pattern, inferred_education, confidence, inference_rule="profession_requires_degree"):
    return ProfessionEducationRule(
        rule_id=rule_id,
        profession_pattern=re.compile(pattern),
        inferred_education=inferred_education,
        confidence=confidence,
        inference_rule=inference_rule,
    )


# Patterns run against folded text (see representantes.text.fold_text)
PROFESSION_EDUCATION_RULES: Tuple[ProfessionEducationRule, ...] = (
    # Legal
    _rule("legal", r"\b(?:abogad[oa]|letrad[oa])\b", "Licenciado en Derecho", 0.95),
    # Medical
    _rule("medical", r"\b(?:medic[oa]|doctora?\s+en\s+medicina|cirujan[oa])\b", "Licenciado en Medicina", 0.95),
    # Healthcare
    _rule("nursing", r"\benfermer[oa]\b", "Diplomado en Enfermería", 0.90),
    _rule("pharmacy", r"\bfarmaceutic[oa]\b", "Licenciado en Farmacia", 0.90),
    # Architecture
    _rule("architecture", r"\barquitect[oa]\b", "Arquitectura", 0.90),
    # Economics and finance
    _rule("economics", r"\beconomista\b", "Licenciado en Economía", 0.85),
    _rule("audit", r"\bauditora?\b", "Licenciado en Economía o ADE", 0.80),
    # Engineering, field ambiguous
    _rule("engineering", r"\bingenier[oa]\b", "Ingeniería", 0.80),
    # Academia
    _rule(
        "academic",
        r"\b(?:catedratic[oa]|profesora?\s+(?:de\s+)?universidad|profesora?\s+universitari[oa])\b",
        "Doctorado",
        0.70,
        "occupation_implies_level",
    ),
)

# Professions that say nothing about education on their own
GENERIC_PROFESSIONS = frozenset({"empresario", "politico", "funcionario", "no consta"})
