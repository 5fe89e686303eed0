"""
Profession category statistics collector.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Sequence

from representantes.model import NO_DATA_LEVEL, PROFESSION_CATEGORIES, Record
from representantes.statistics.base import StatisticsCollector, register_collector
from representantes.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class ProfessionsCollector(StatisticsCollector):
    """
    Statistics collected:
        - por_categoria: records per profession category (all categories present),
          using Record.profession_category
    """
    collector_id: str = "professions"

    def collect(self, records: Sequence[Record]) -> Stats:
        stats = Stats()
        counts = Counter(r.profession_category for r in records)
        stats.add_value(
            self.collector_id,
            'por_categoria',
            {category: counts.get(category, 0) for category in PROFESSION_CATEGORIES},
        )
        logger.debug(f"Professions: {len(records) - counts.get(NO_DATA_LEVEL, 0)} records with a category")
        return stats
