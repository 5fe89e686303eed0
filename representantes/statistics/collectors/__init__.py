"""
Built-in statistics collectors.

Import collectors here to automatically register them.
"""

from representantes.statistics.collectors.composition import ChambersCollector, PartiesCollector
from representantes.statistics.collectors.education import EducationCollector
from representantes.statistics.collectors.professions import ProfessionsCollector
from representantes.statistics.collectors.coverage import CoverageCollector

__all__ = [
    'ChambersCollector',
    'PartiesCollector',
    'EducationCollector',
    'ProfessionsCollector',
    'CoverageCollector',
]
