"""Normalization of free-text education descriptions into the three-level taxonomy."""

from .education import EducationRule
from .education import EDUCATION_RULES
from .education import match_education_rule
from .education import normalize_education
from .education import education_explanation
from .education import map_legacy_education_level

__all__ = [
    'EducationRule',
    'EDUCATION_RULES',
    'match_education_rule',
    'normalize_education',
    'education_explanation',
    'map_legacy_education_level',
]
