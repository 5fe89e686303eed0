"""
Statistics module: aggregate analysis over a collection of records.

Unlike the quality module, which reports problems with individual records,
statistics summarize the whole dataset: chamber and party composition,
education distribution, profession categories and data coverage.

Main components:
    - StatisticsCollector: Base class for creating custom statistics collectors
    - StatisticsPipeline: Orchestrates running multiple collectors
    - compute_stats / compare_stats: Convenience entry points
"""

from representantes.statistics.base import StatisticsCollector, register_collector, get_collector_registry
from representantes.statistics.model import Stats, StatValue
from representantes.statistics.pipeline import StatisticsPipeline, compute_stats, compare_stats

# Import collectors to ensure they're registered
from representantes.statistics import collectors

__all__ = [
    'StatisticsCollector',
    'register_collector',
    'get_collector_registry',
    'StatisticsPipeline',
    'compute_stats',
    'compare_stats',
    'Stats',
    'StatValue',
    'collectors',
]
