"""
Tests for Settings
==================
Tests for the app.yaml loader and the NAMEKIT_CONFIG override.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit import settings
from namekit.generators import MarkovNameGenerator
from namekit.random_source import SeededRandom


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached config before and after each test."""
    settings.load_app_config.cache_clear()
    yield
    settings.load_app_config.cache_clear()


@pytest.fixture
def custom_config(tmp_path, monkeypatch):
    path = tmp_path / 'app.yaml'
    path.write_text(
        "generation:\n"
        "  next_name: {min_length: 2, max_length: 5}\n"
        "  get_name: {min_length: 3, max_length: 6}\n"
        "  max_tries_margin: 5\n"
    )
    monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
    return path


class TestDefaults:
    """Tests for the bundled app.yaml."""

    def test_generation_defaults(self):
        assert settings.get_setting('generation.next_name.min_length') == 4
        assert settings.get_setting('generation.next_name.max_length') == 12
        assert settings.get_setting('generation.get_name.min_length') == 4
        assert settings.get_setting('generation.get_name.max_length') == 16
        assert settings.get_setting('generation.max_tries_margin') == 100

    def test_missing_key_default(self):
        assert settings.get_setting('generation.nope', 'fallback') == 'fallback'
        assert settings.get_setting('logging.level.deeper') is None


class TestOverride:
    """Tests for NAMEKIT_CONFIG."""

    def test_override_used(self, custom_config):
        assert settings.config_path() == custom_config
        assert settings.get_setting('generation.max_tries_margin') == 5

    def test_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(tmp_path / 'missing.yaml'))
        with pytest.raises(FileNotFoundError):
            settings.load_app_config()

    def test_generator_ignores_config(self, custom_config):
        """The try margin is fixed by the generator, not by app.yaml."""
        gen = MarkovNameGenerator(0, [])
        result = gen.generate(4, 16, SeededRandom(1))
        assert result.truncated
        assert result.tries == 16 + 100

    def test_generator_default_bounds_ignore_config(self, custom_config):
        gen = MarkovNameGenerator(0, ['ann'])
        assert gen.get_name(1) == 'Annann'
        assert gen.next_name() == 'Annann'

    def test_generator_with_empty_config(self, tmp_path, monkeypatch):
        path = tmp_path / 'app.yaml'
        path.write_text("")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
        gen = MarkovNameGenerator(1, ['ann'])
        assert gen.get_name(1, 0, 10) == 'Ann'

    def test_explicit_margin(self):
        gen = MarkovNameGenerator(0, [], max_tries_margin=3)
        assert gen.generate(4, 16, SeededRandom(1)).tries == 19

    def test_cli_bounds_from_config(self, custom_config):
        from namekit.cli import generation_bounds
        assert generation_bounds('next_name') == {'min_length': 2, 'max_length': 5}
        assert generation_bounds('get_name', max_length=9) == {'min_length': 3, 'max_length': 9}

    def test_cli_bounds_without_config(self, tmp_path, monkeypatch):
        from namekit.cli import generation_bounds
        path = tmp_path / 'app.yaml'
        path.write_text("logging: {level: INFO}\n")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
        assert generation_bounds('get_name') == {}
        assert generation_bounds('get_name', min_length=0) == {'min_length': 0}


class TestResolvePath:
    """Tests for resolve_path()."""

    def test_relative_to_project_root(self):
        assert settings.resolve_path('namekit') == settings.PROJECT_ROOT / 'namekit'

    def test_absolute_kept(self, tmp_path):
        assert settings.resolve_path(str(tmp_path)) == tmp_path

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            settings.resolve_path(None)
