"""
Tests for Themes
================
Tests for the bundled YAML example-name themes.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.themes import LAKE_NAMES, TOWN_NAMES, Theme, list_themes, load_theme


class TestListThemes:
    """Tests for theme discovery."""

    def test_bundled_themes(self):
        themes = list_themes()
        assert 'fantasy' in themes
        assert 'nordic' in themes

    def test_sorted(self):
        themes = list_themes()
        assert themes == sorted(themes)


class TestLoadTheme:
    """Tests for load_theme()."""

    @pytest.mark.parametrize('name', ['fantasy', 'nordic'])
    def test_has_town_and_lake_names(self, name):
        theme = load_theme(name)
        assert theme.name == name
        assert len(theme.town_names) > 10
        assert len(theme.lake_names) > 10
        assert all(isinstance(n, str) and n for n in theme.town_names)

    def test_category_names(self):
        theme = load_theme('fantasy')
        assert theme.category_names == sorted([LAKE_NAMES, TOWN_NAMES])

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            load_theme('klingon')

    def test_unknown_category(self):
        theme = load_theme('fantasy')
        with pytest.raises(ValueError, match="no category 'river_names'"):
            theme.names('river_names')


class TestTheme:
    """Tests for the Theme dataclass."""

    def test_names_returns_copy(self):
        theme = Theme('custom', {TOWN_NAMES: ['Ashford']})
        theme.names(TOWN_NAMES).append('Bramley')
        assert theme.town_names == ['Ashford']

    def test_missing_lake_names(self):
        theme = Theme('custom', {TOWN_NAMES: ['Ashford']})
        with pytest.raises(ValueError, match="Available categories: town_names"):
            theme.lake_names

    def test_empty_theme(self):
        theme = Theme('empty')
        assert theme.category_names == []
        with pytest.raises(ValueError):
            theme.town_names
