"""
Pipeline for running statistics collectors.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Dict, Iterable, List, Optional

from representantes.config import RepresentantesConfig
from representantes.statistics.base import StatisticsCollector, get_collector_registry
from representantes.statistics.model import Stats

logger = logging.getLogger(__name__)


@dataclass
class StatisticsPipeline:
    """
    Pipeline for running statistics collectors on a set of records.

    Attributes:
        collectors: Collector instances to run; loaded from the registry when empty.
        config: Configuration deciding which registered collectors are enabled.
    """
    collectors: List[StatisticsCollector] = field(default_factory=list)
    config: RepresentantesConfig = field(default_factory=RepresentantesConfig)

    def __post_init__(self) -> None:
        if not self.collectors:
            self._load_collectors_from_registry()

    def _load_collectors_from_registry(self) -> None:
        """Instantiate each registered collector with its enabled flag from config."""
        for collector_id, collector_cls in get_collector_registry().items():
            enabled = self.config.collector_enabled(collector_id)
            self.collectors.append(collector_cls(enabled=enabled))
            logger.debug(f"Loaded collector: {collector_id} (enabled={enabled})")

    def run(self, records: Iterable[Any]) -> Stats:
        """
        Run all enabled collectors.

        Args:
            records: Record or EnrichedRecord objects.

        Returns:
            Stats object with all collected values
        """
        stats = Stats()
        # EnrichedRecord wraps the record the collectors read
        record_list = [getattr(r, 'record', r) for r in records]
        logger.debug(f"Running statistics on {len(record_list)} records")

        for collector in self.collectors:
            if not collector.enabled:
                logger.debug(f"Skipping disabled collector: {collector.collector_id}")
                continue
            try:
                stats.merge(collector.collect(record_list))
            except Exception as e:
                logger.error(f"Error in collector {collector.collector_id}: {e}", exc_info=True)
        return stats


def compute_stats(records: Iterable[Any], config: Optional[RepresentantesConfig] = None) -> Stats:
    """Aggregate statistics for a set of records with all enabled collectors."""
    return StatisticsPipeline(config=config or RepresentantesConfig()).run(records)


def compare_stats(before: Stats, after: Stats) -> Dict[str, float]:
    """
    Compare two legislatures' statistics.

    Returns:
        Dict with 'total_change' (records) and the percentage-point changes of
        university-level and No_consta education.
    """
    return {
        'total_change': after.total - before.total,
        'universitaria_pct_change': (after.percent('education', 'por_simplificado', 'Universitaria')
                                     - before.percent('education', 'por_simplificado', 'Universitaria')),
        'no_consta_pct_change': (after.percent('education', 'por_nivel', 'No_consta')
                                 - before.percent('education', 'por_nivel', 'No_consta')),
    }
