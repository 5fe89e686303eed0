"""
Base classes for statistics collectors.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Dict, Sequence, Type

from representantes.model import Record
from representantes.statistics.model import Stats

logger = logging.getLogger(__name__)

# Collector Registry
_COLLECTOR_REGISTRY: Dict[str, Type['StatisticsCollector']] = {}


def register_collector(cls: Type['StatisticsCollector']) -> Type['StatisticsCollector']:
    """
    Decorator to register a collector class in the global registry.

    Usage:
        @register_collector
        @dataclass
        class MyCollector(StatisticsCollector):
            collector_id: str = "my_collector"
            ...
    """
    if getattr(cls, 'collector_id', None):
        _COLLECTOR_REGISTRY[cls.collector_id] = cls
        logger.debug(f"Registered statistics collector: {cls.collector_id}")
    else:
        logger.warning(f"Collector {cls.__name__} missing 'collector_id' attribute, not registered")
    return cls


def get_collector_registry() -> Dict[str, Type['StatisticsCollector']]:
    """Get the global collector registry."""
    return _COLLECTOR_REGISTRY.copy()


@dataclass
class StatisticsCollector(ABC):
    """
    Base class for statistics collectors.

    Collectors read records and produce aggregate values; they never modify
    the records.

    Attributes:
        collector_id: Unique identifier, also the Stats category it writes.
        enabled: Whether this collector is enabled (can be set via config).
    """
    collector_id: str = ""
    enabled: bool = True

    def __post_init__(self):
        if not self.collector_id:
            raise ValueError(f"{self.__class__.__name__} must define collector_id")

    @abstractmethod
    def collect(self, records: Sequence[Record]) -> Stats:
        """
        Collect statistics from the records.

        Args:
            records: Records (or EnrichedRecords) to analyze.

        Returns:
            Stats object with collected values
        """
