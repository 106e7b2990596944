#!/usr/bin/env python3
"""
namekit
=======
Pronounceable name generation from example names using a second-order
character Markov chain.

Usage:
    from namekit import MarkovNameGenerator, load_theme

    theme = load_theme('fantasy')
    gen = MarkovNameGenerator.from_theme(theme, 'town_names', seed=42)
    gen.next_name()            # e.g. 'Bramby'
    gen.get_name(seed=7)       # reproducible for seed 7
"""

__version__ = '0.1.0'

from .markov_chain import (
    TERMINATOR,
    Alphabet,
    ChainCursor,
    MarkovChain,
    TransitionModel,
)
from .random_source import RandomSource, SeededRandom
from .generators import GenerationResult, MarkovNameGenerator, NameGenerator
from .themes import Theme, list_themes, load_theme
from .settings import get_setting

__all__ = [
    '__version__',
    'TERMINATOR',
    'Alphabet',
    'ChainCursor',
    'MarkovChain',
    'TransitionModel',
    'RandomSource',
    'SeededRandom',
    'NameGenerator',
    'MarkovNameGenerator',
    'GenerationResult',
    'Theme',
    'list_themes',
    'load_theme',
    'get_generator',
]


def get_generator(theme: str = None, category: str = None,
                  seed: int = 0) -> MarkovNameGenerator:
    """Build a generator for a bundled theme category (defaults from app.yaml)."""
    theme = theme or get_setting('themes.default', 'fantasy')
    category = category or get_setting('themes.default_category', 'town_names')
    return MarkovNameGenerator.from_theme(load_theme(theme), category, seed)
