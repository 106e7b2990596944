#!/usr/bin/env python3
"""
Name Generator Base Class
=========================
The capability every name generator offers: an advancing stream of names,
and reproducible one-off names derived from a seed.
"""

from abc import ABC, abstractmethod


class NameGenerator(ABC):
    """Abstract base class for name generators."""

    @abstractmethod
    def next_name(self) -> str:
        """Generate the next name from the generator's own random stream."""

    @abstractmethod
    def get_name(self, seed: int) -> str:
        """Generate a name determined entirely by ``seed``."""
