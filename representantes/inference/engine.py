"""
Inference engine: proposes an education level from profession text.

Proposals are attached to records as pending EducationInference objects;
only a reviewer (see inference.review) can apply them.
"""
from __future__ import annotations

from dataclasses import replace
import logging
from typing import Iterable, List, Literal, Optional, Tuple

from representantes.config import DEFAULT_HIGH_CONFIDENCE, DEFAULT_REVIEW_CONFIDENCE
from representantes.model import EducationInference, Record
from representantes.text import fold_text
from .rules import GENERIC_PROFESSIONS, PROFESSION_EDUCATION_RULES, ProfessionEducationRule

logger = logging.getLogger(__name__)


def match_profession_rule(profession_text: Optional[str]) -> Optional[ProfessionEducationRule]:
    """
    Return the first profession rule matching the text, or None.

    Missing text and generic professions ("Empresario", "Político", ...) never match.
    """
    folded = fold_text(profession_text)
    if not folded or folded in GENERIC_PROFESSIONS:
        return None
    for rule in PROFESSION_EDUCATION_RULES:
        if rule.profession_pattern.search(folded):
            return rule
    return None


def infer_education_from_profession(
    profession_text: Optional[str],
    profession_category: Optional[str] = None,
) -> Optional[EducationInference]:
    """
    Propose an education level from profession text.

    The result is only a proposal: it is never applied and carries no review
    data. Applying it is a reviewer's decision (see inference.review).

    Args:
        profession_text: Raw profession text.
        profession_category: Profession category. Accepted for callers that
            have it; it does not change the outcome.

    Returns:
        EducationInference, or None when the text implies nothing.

    Example:
        >>> infer_education_from_profession('Abogado', 'Profesional_liberal').inferred_education
        'Licenciado en Derecho'
    """
    rule = match_profession_rule(profession_text)
    if rule is None:
        return None
    return EducationInference(
        inferred_education=rule.inferred_education,
        inference_rule=rule.inference_rule,
        confidence=rule.confidence,
    )


def needs_education_inference(record: Record) -> bool:
    """
    Check whether a record is a candidate for inference.

    True only if education is No_consta, a non-empty profession observation
    exists, and no inference (pending, approved or rejected) is attached yet.
    """
    if record.has_education:
        return False
    if not record.has_profession:
        return False
    if record.education_inference is not None:
        return False
    return True


def attach_inference(record: Record) -> Record:
    """
    Return a copy of the record with a freshly computed inference attached.

    Returns the record unchanged when it does not need inference or when the
    profession implies nothing, so calling it again is a no-op.
    """
    if not needs_education_inference(record):
        return record
    inference = infer_education_from_profession(record.profession_text)
    if inference is None:
        return record
    logger.debug(f"Inferred '{inference.inferred_education}' ({inference.confidence}) for {record.nombre_completo}")
    return replace(record, education_inference=inference)


def get_records_needing_inference(records: Iterable[Record]) -> List[Tuple[Record, EducationInference]]:
    """
    Pair every record that needs inference with the inference it would get.

    Records whose profession implies nothing are left out.
    """
    pending: List[Tuple[Record, EducationInference]] = []
    for record in records:
        if not needs_education_inference(record):
            continue
        inference = infer_education_from_profession(record.profession_text)
        if inference is not None:
            pending.append((record, inference))
    logger.info(f"{len(pending)} records have an inferable education")
    return pending


def confidence_band(
    confidence: float,
    high_confidence: float = DEFAULT_HIGH_CONFIDENCE,
    review_confidence: float = DEFAULT_REVIEW_CONFIDENCE,
) -> Literal["expedited", "review", "weak"]:
    """Downstream review policy band for an inference confidence."""
    if confidence >= high_confidence:
        return "expedited"
    if confidence >= review_confidence:
        return "review"
    return "weak"
