#!/usr/bin/env python3
"""
Themes
======
Example name lists grouped by category (town names, lake names, ...).

Each theme is a YAML file in ``namekit/theme_data/`` mapping category names to
lists of example strings:

    town_names:
      - Ashford
      - Bramley
    lake_names:
      - Windermere
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

import yaml

THEMES_DIR = Path(__file__).parent / 'theme_data'

TOWN_NAMES = 'town_names'
LAKE_NAMES = 'lake_names'


@dataclass
class Theme:
    """A named set of example-name categories."""
    name: str
    categories: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def category_names(self) -> List[str]:
        return sorted(self.categories)

    def names(self, category: str) -> List[str]:
        """Example names for ``category``."""
        if category not in self.categories:
            available = ', '.join(self.category_names) or '(none)'
            raise ValueError(
                f"Theme '{self.name}' has no category '{category}'. "
                f"Available categories: {available}"
            )
        return list(self.categories[category])

    @property
    def town_names(self) -> List[str]:
        return self.names(TOWN_NAMES)

    @property
    def lake_names(self) -> List[str]:
        return self.names(LAKE_NAMES)


def list_themes() -> List[str]:
    """Names of the bundled themes."""
    return sorted(p.stem for p in THEMES_DIR.glob('*.yaml'))


@lru_cache(maxsize=10)
def _load_yaml(filename: str) -> Dict:
    filepath = THEMES_DIR / filename
    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_theme(name: str) -> Theme:
    """
    Load a bundled theme by name.

    Raises:
        ValueError: If no such theme exists or its file is malformed
    """
    if name not in list_themes():
        available = ', '.join(list_themes())
        raise ValueError(f"Unknown theme '{name}'. Available themes: {available}")

    data = _load_yaml(f'{name}.yaml')
    if not isinstance(data, dict):
        raise ValueError(f"Theme '{name}' must map categories to name lists")

    categories = {}
    for category, names in data.items():
        if not isinstance(names, list):
            raise ValueError(f"Theme '{name}': category '{category}' must be a list")
        categories[str(category)] = [str(n) for n in names]
    return Theme(name=name, categories=categories)
