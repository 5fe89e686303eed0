"""
Education level statistics collector.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Sequence

from representantes.model import NORMALIZED_LEVELS, SIMPLIFIED_LEVELS, Record
from representantes.statistics.base import StatisticsCollector, register_collector
from representantes.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class EducationCollector(StatisticsCollector):
    """
    Collects the education distribution.

    Statistics collected:
        - por_nivel: records per normalized level (all nine levels present)
        - por_simplificado: records per simplified tier
        - universitaria_pct: share of university-level records, in percent
        - inferencias_pendientes: records with an inference awaiting review
    """
    collector_id: str = "education"

    def collect(self, records: Sequence[Record]) -> Stats:
        stats = Stats()
        normalized = Counter(r.education_levels.normalized for r in records)
        simplified = Counter(r.education_levels.simplified for r in records)
        total = len(records)

        stats.add_value(self.collector_id, 'por_nivel', {level: normalized.get(level, 0) for level in NORMALIZED_LEVELS})
        stats.add_value(self.collector_id, 'por_simplificado', {tier: simplified.get(tier, 0) for tier in SIMPLIFIED_LEVELS})
        stats.add_value(
            self.collector_id,
            'universitaria_pct',
            round(simplified.get('Universitaria', 0) / total * 100, 1) if total else 0.0,
        )

        pending = sum(
            1 for r in records
            if r.education_inference is not None and r.education_inference.status == "pending"
        )
        stats.add_value(self.collector_id, 'inferencias_pendientes', pending)
        logger.debug(f"Education: {simplified.get('Universitaria', 0)}/{total} university-level, {pending} pending inferences")
        return stats
