"""
Data coverage statistics collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from representantes.model import Record
from representantes.statistics.base import StatisticsCollector, register_collector
from representantes.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class CoverageCollector(StatisticsCollector):
    """
    Statistics collected:
        - estudios_con_datos / estudios_sin_datos
        - profesion_con_datos / profesion_sin_datos
    """
    collector_id: str = "coverage"

    def collect(self, records: Sequence[Record]) -> Stats:
        stats = Stats()
        with_education = sum(1 for r in records if r.has_education)
        with_profession = sum(1 for r in records if r.has_profession)

        stats.add_value(self.collector_id, 'estudios_con_datos', with_education)
        stats.add_value(self.collector_id, 'estudios_sin_datos', len(records) - with_education)
        stats.add_value(self.collector_id, 'profesion_con_datos', with_profession)
        stats.add_value(self.collector_id, 'profesion_sin_datos', len(records) - with_profession)
        logger.debug(f"Coverage: {with_education} with education, {with_profession} with profession")
        return stats
