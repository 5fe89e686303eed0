"""
parties.py - Party metadata (names and colours) for visualizations.

The party table is loaded from the packaged parties.yaml; unknown parties
resolve to the "Otros" fallback.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PARTIES_PATH = Path(__file__).parent / "parties.yaml"


@dataclass(frozen=True)
class Party:
    id: str
    nombre: str
    nombre_corto: str
    color: str
    color_secundario: Optional[str] = None


def load_parties(parties_path: Optional[Path] = None) -> Tuple[Dict[str, Party], Party]:
    """
    Load the party table from YAML.

    Args:
        parties_path: Path to a parties YAML file. Defaults to the packaged one.

    Returns:
        Tuple[Dict[str, Party], Party]: (party name -> Party, fallback Party)

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML or has no fallback entry.
    """
    parties_path = Path(parties_path) if parties_path else DEFAULT_PARTIES_PATH
    if not parties_path.exists():
        raise FileNotFoundError(f"Parties file not found: {parties_path}")
    try:
        with open(parties_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {parties_path}: {e}")

    if 'fallback' not in data:
        raise ValueError(f"Parties file {parties_path} has no 'fallback' entry")
    parties = {name: Party(**values) for name, values in (data.get('parties') or {}).items()}
    logger.debug(f"Loaded {len(parties)} parties from {parties_path}")
    return parties, Party(**data['fallback'])


@lru_cache(maxsize=1)
def _default_parties() -> Tuple[Dict[str, Party], Party]:
    return load_parties()


def get_party(partido: str) -> Party:
    """Party metadata by party name, falling back to "Otros"."""
    parties, fallback = _default_parties()
    return parties.get(partido, fallback)


def get_party_color(partido: str) -> str:
    """Primary colour for a party, falling back to the "Otros" colour."""
    return get_party(partido).color


def all_parties() -> List[Party]:
    """All known parties, without the fallback."""
    parties, _ = _default_parties()
    return list(parties.values())
