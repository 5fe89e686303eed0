"""
Data models for statistics module.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


StatValue = Union[int, float, str, List[Any], Dict[str, Any]]


@dataclass
class Stats:
    """
    Aggregate values over a set of parliamentarian records.

    Values are grouped by the collector_id that wrote them ('chambers',
    'parties', 'education', 'professions', 'coverage') and named within each
    group. Most values are distributions: label -> number of records, e.g.
    stats.distribution('education', 'por_nivel')['Master'].
    """
    categories: Dict[str, Dict[str, StatValue]] = field(default_factory=dict)

    def add_value(self, category: str, name: str, value: StatValue) -> None:
        self.categories.setdefault(category, {})[name] = value

    def get_value(self, category: str, name: str, default: Optional[StatValue] = None) -> Optional[StatValue]:
        return self.categories.get(category, {}).get(name, default)

    def get_category(self, category: str) -> Dict[str, StatValue]:
        return self.categories.get(category, {})

    def distribution(self, category: str, name: str) -> Dict[str, int]:
        """A label -> count distribution; empty when the collector did not run."""
        value = self.get_value(category, name)
        return dict(value) if isinstance(value, dict) else {}

    @property
    def total(self) -> int:
        """Number of records, as counted by the chambers collector (0 if absent)."""
        return int(self.get_value('chambers', 'total', 0))

    def percent(self, category: str, name: str, label: str) -> float:
        """Share of all records carrying `label` in a distribution, in percent."""
        if not self.total:
            return 0.0
        return self.distribution(category, name).get(label, 0) / self.total * 100

    def merge(self, other: Stats) -> None:
        """Merge another Stats object into this one; other's values win on clashes."""
        for category, values in other.categories.items():
            self.categories.setdefault(category, {}).update(values)

    def to_dict(self) -> Dict[str, Dict[str, StatValue]]:
        return {category: dict(values) for category, values in self.categories.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, StatValue]]) -> Stats:
        return cls(categories={category: dict(values) for category, values in data.items()})
