"""
Base classes for quality checks.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Dict, List, Literal, Sequence, Type

from representantes.model import Record
from .model import QualityIssue

logger = logging.getLogger(__name__)

# Check Registry
_CHECK_REGISTRY: Dict[str, Type['QualityCheck']] = {}


def register_check(cls: Type['QualityCheck']) -> Type['QualityCheck']:
    """
    Decorator to register a check class in the global registry.

    Usage:
        @register_check
        @dataclass
        class MyCheck(QualityCheck):
            check_id: str = "my_check"
            ...
    """
    check_id = getattr(cls, 'check_id', None)
    if check_id:
        _CHECK_REGISTRY[check_id] = cls
        logger.debug(f"Registered quality check: {check_id}")
    else:
        logger.warning(f"Check {cls.__name__} missing 'check_id' attribute, not registered")
    return cls


def get_check_registry() -> Dict[str, Type['QualityCheck']]:
    """Get the global check registry, in registration order."""
    return _CHECK_REGISTRY.copy()


@dataclass
class QualityCheck(ABC):
    """
    Base class for quality checks.

    Checks read a snapshot of records and report issues as data. They never
    modify the records and never raise on records of the expected shape.

    Attributes:
        check_id: Unique identifier for this check.
        bucket: Report bucket the issues go to ('conflicts' or 'suspicious').
        enabled: Whether the validator runs this check.
    """
    check_id: str = ""
    bucket: Literal["conflicts", "suspicious"] = "conflicts"
    enabled: bool = True

    def __post_init__(self):
        if not self.check_id:
            raise ValueError(f"{self.__class__.__name__} must define check_id")

    @abstractmethod
    def run(self, records: Sequence[Record]) -> List[QualityIssue]:
        """Return the issues found in the records."""
