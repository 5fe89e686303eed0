"""
config.py - Policy configuration for inference, quality checks and statistics.

Defaults live in the dataclass so the classifiers never need to touch the
filesystem; the packaged config.yaml carries the same values and is the
place to change them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# Validator policy: stricter than the weakest inference band, so academic
# titles (0.70) never raise an inconsistency on their own.
DEFAULT_INCONSISTENCY_THRESHOLD = 0.90
DEFAULT_HIGH_CONFIDENCE = 0.95
DEFAULT_REVIEW_CONFIDENCE = 0.80


@dataclass
class RepresentantesConfig:
    """
    Configuration for the representantes pipeline.

    Attributes:
        high_confidence: Inference confidence eligible for expedited approval.
        review_confidence: Inference confidence that is plausible but needs review.
        inconsistency_threshold: Minimum inference confidence for a suspicious-data issue.
        checks_enabled: quality check_id -> enabled.
        collectors_enabled: statistics collector_id -> enabled.
    """
    high_confidence: float = DEFAULT_HIGH_CONFIDENCE
    review_confidence: float = DEFAULT_REVIEW_CONFIDENCE
    inconsistency_threshold: float = DEFAULT_INCONSISTENCY_THRESHOLD
    checks_enabled: Dict[str, bool] = field(default_factory=dict)
    collectors_enabled: Dict[str, bool] = field(default_factory=dict)

    def __post_init__(self):
        for name in ('high_confidence', 'review_confidence', 'inconsistency_threshold'):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")

    def check_enabled(self, check_id: str) -> bool:
        # default: enabled unless explicitly false
        return self.checks_enabled.get(check_id, True)

    def collector_enabled(self, collector_id: str) -> bool:
        return self.collectors_enabled.get(collector_id, True)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> RepresentantesConfig:
        """
        Create configuration from a nested dictionary (same layout as config.yaml).

        Missing sections and keys fall back to the defaults.

        Args:
            config_dict (Dict[str, Any]): Dictionary with 'inference', 'quality'
                and 'statistics' sections.

        Returns:
            RepresentantesConfig: Configuration instance.
        """
        inference = config_dict.get('inference') or {}
        quality = config_dict.get('quality') or {}
        statistics = config_dict.get('statistics') or {}
        return cls(
            high_confidence=float(inference.get('high_confidence', DEFAULT_HIGH_CONFIDENCE)),
            review_confidence=float(inference.get('review_confidence', DEFAULT_REVIEW_CONFIDENCE)),
            inconsistency_threshold=float(quality.get('inconsistency_threshold', DEFAULT_INCONSISTENCY_THRESHOLD)),
            checks_enabled=_enabled_map(quality.get('checks')),
            collectors_enabled=_enabled_map(statistics.get('collectors')),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Optional[Path] = None) -> RepresentantesConfig:
        """
        Load configuration from a YAML file.

        Args:
            yaml_path: Path to YAML config file. Defaults to the packaged config.yaml.

        Returns:
            RepresentantesConfig: Configuration instance loaded from YAML.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid YAML.
        """
        yaml_path = Path(yaml_path) if yaml_path else DEFAULT_CONFIG_PATH
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing {yaml_path}: {e}")
        logger.debug(f"Loaded representantes config from {yaml_path}")
        return cls.from_dict(config_dict)


def _enabled_map(settings: Any) -> Dict[str, bool]:
    """Accept both `id: true` and `id: {enabled: true}` forms."""
    enabled: Dict[str, bool] = {}
    for key, value in (settings or {}).items():
        if isinstance(value, dict):
            enabled[key] = bool(value.get('enabled', True))
        else:
            enabled[key] = bool(value)
    return enabled
