"""
Chamber and party composition collectors.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Sequence

from representantes.model import CAMARAS, Record
from representantes.statistics.base import StatisticsCollector, register_collector
from representantes.statistics.model import Stats

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class ChambersCollector(StatisticsCollector):
    """
    Statistics collected:
        - total: number of records
        - por_camara: records per chamber (both chambers always present)
    """
    collector_id: str = "chambers"

    def collect(self, records: Sequence[Record]) -> Stats:
        stats = Stats()
        counts = Counter(r.camara for r in records)
        stats.add_value(self.collector_id, 'total', len(records))
        stats.add_value(self.collector_id, 'por_camara', {camara: counts.get(camara, 0) for camara in CAMARAS})
        return stats


@register_collector
@dataclass
class PartiesCollector(StatisticsCollector):
    """
    Statistics collected:
        - por_partido: records per party, largest first
        - num_partidos: distinct parties
    """
    collector_id: str = "parties"

    def collect(self, records: Sequence[Record]) -> Stats:
        stats = Stats()
        counts = Counter(r.partido for r in records)
        stats.add_value(self.collector_id, 'por_partido', dict(counts.most_common()))
        stats.add_value(self.collector_id, 'num_partidos', len(counts))
        logger.debug(f"Parties: {len(counts)} distinct")
        return stats
