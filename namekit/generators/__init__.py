#!/usr/bin/env python3
"""
Name Generators
===============
- NameGenerator: the next_name / get_name(seed) capability
- MarkovNameGenerator: statistical character-level generation
"""

from .base_generator import NameGenerator
from .markov_name_generator import (
    GenerationResult,
    MarkovNameGenerator,
)

__all__ = [
    'NameGenerator',
    'MarkovNameGenerator',
    'GenerationResult',
]
