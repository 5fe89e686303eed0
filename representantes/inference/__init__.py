"""Inference module: proposes education from profession text for human review.

Core functions:
    - infer_education_from_profession: first-match rule lookup, never applied
    - needs_education_inference: whether a record is a candidate
    - attach_inference: record with a pending inference attached
    - review_inference: approve / reject / modify a pending inference

Example:
    >>> from representantes.inference import infer_education_from_profession
    >>> inference = infer_education_from_profession('Abogada')
    >>> inference.confidence, inference.applied
    (0.95, False)
"""

from .rules import ProfessionEducationRule
from .rules import PROFESSION_EDUCATION_RULES
from .rules import GENERIC_PROFESSIONS
from .engine import match_profession_rule
from .engine import infer_education_from_profession
from .engine import needs_education_inference
from .engine import attach_inference
from .engine import get_records_needing_inference
from .engine import confidence_band
from .review import ReviewError
from .review import REVIEW_ACTIONS
from .review import review_inference
from .review import filter_inferences
from .review import inference_summary

__all__ = [
    'ProfessionEducationRule',
    'PROFESSION_EDUCATION_RULES',
    'GENERIC_PROFESSIONS',
    'match_profession_rule',
    'infer_education_from_profession',
    'needs_education_inference',
    'attach_inference',
    'get_records_needing_inference',
    'confidence_band',
    'ReviewError',
    'REVIEW_ACTIONS',
    'review_inference',
    'filter_inferences',
    'inference_summary',
]
