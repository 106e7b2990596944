#!/usr/bin/env python3
"""
Markov Chain Name Generator
===========================
Generates pronounceable names from a second-order character Markov chain
trained on a list of example names.

Two ways to draw names:
- ``next_name()`` uses the generator's own random stream. Successive calls
  give a reproducible sequence for a fixed construction seed, but the stream
  is shared state: serialize access when calling from several threads.
- ``get_name(seed)`` uses a one-off stream built from ``seed``. The result
  depends only on the seed, the bounds and the training names.

Names are capitalized, never contain the terminator, and are at most
``max_length`` characters long. When the chain keeps ending too early the walk
gives up after ``max_length + 100`` draws and returns what it has; the result
is then flagged as truncated.
"""

import logging
from dataclasses import dataclass
from typing import List

from ..markov_chain import TERMINATOR, MarkovChain, TransitionModel
from ..random_source import RandomSource, SeededRandom
from .base_generator import NameGenerator

logger = logging.getLogger(__name__)

# draws allowed beyond max_length before a name is truncated
MAX_TRIES_MARGIN = 100


@dataclass
class GenerationResult:
    """Outcome of a single sampling run."""
    name: str
    truncated: bool = False
    tries: int = 0


def _capitalize(symbol: str) -> str:
    # keep one symbol per character ('ß'.upper() would be 'SS')
    upper = symbol.upper()
    return upper if len(upper) == 1 else symbol


class MarkovNameGenerator(NameGenerator):
    """
    Name generator backed by a two-character look-back Markov chain.

    Example:
        gen = MarkovNameGenerator(42, ['Ashford', 'Bramley', 'Cresswell'])
        gen.next_name()          # advances the generator's stream
        gen.get_name(7)          # same result for seed 7, every time
    """

    def __init__(self, seed: int, source_names: List[str],
                 max_tries_margin: int = MAX_TRIES_MARGIN):
        """
        Create a new name generator, using the given list as example source.

        Args:
            seed: Seed for the generator-owned random stream
            source_names: Example names to learn from
            max_tries_margin: Draws allowed beyond max_length before giving up
        """
        self.random = SeededRandom(seed)
        self.model = TransitionModel.build(source_names)
        self.max_tries_margin = max_tries_margin

    @classmethod
    def from_theme(cls, theme, category: str, seed: int,
                   max_tries_margin: int = MAX_TRIES_MARGIN) -> 'MarkovNameGenerator':
        """Train on one category of a Theme (e.g. 'town_names')."""
        return cls(seed, theme.names(category), max_tries_margin)

    def generate(self,
                 min_length: int,
                 max_length: int,
                 rng: RandomSource) -> GenerationResult:
        """
        Sample one name using the given random source.

        Args:
            min_length: Minimal length of the generated name
            max_length: Maximal length of the generated name
            rng: Random source to draw from

        Returns:
            GenerationResult with the name and whether it was truncated

        Raises:
            ValueError: If the bounds are negative or inverted
        """
        if min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {min_length}")
        if max_length < min_length:
            raise ValueError(
                f"max_length ({max_length}) must be >= min_length ({min_length})"
            )

        chain = MarkovChain(self.model, rng)
        chain.reset_history()

        chars = []
        tries = 0
        max_tries = max_length + self.max_tries_margin
        finished = max_length == 0

        while not finished and tries < max_tries:
            symbol = chain.next()
            tries += 1
            if symbol != TERMINATOR:
                chars.append(symbol)
            finished = ((symbol == TERMINATOR and len(chars) >= min_length)
                        or len(chars) >= max_length)

        # TODO: raise the terminator weight as the name nears max_length
        # instead of cutting it off once the tries run out
        name = ''.join(chars).strip()
        if name:
            name = _capitalize(name[0]) + name[1:]
        return GenerationResult(
            name=name,
            truncated=not finished,
            tries=tries,
        )

    def _generate_logged(self, min_length: int, max_length: int,
                         rng: RandomSource) -> GenerationResult:
        result = self.generate(min_length, max_length, rng)
        if result.truncated:
            logger.warning(
                f"Could not generate name of desired length - result: {result.name!r}"
            )
        return result

    def next_result(self, min_length: int = 4, max_length: int = 12) -> GenerationResult:
        """next_name(), keeping the truncation flag and try count."""
        return self._generate_logged(min_length, max_length, self.random)

    def get_result(self, seed: int, min_length: int = 4,
                   max_length: int = 16) -> GenerationResult:
        """get_name(), keeping the truncation flag and try count."""
        return self._generate_logged(min_length, max_length, SeededRandom(seed))

    def next_name(self, min_length: int = 4, max_length: int = 12) -> str:
        """Generate the next name from the generator's own random stream."""
        return self.next_result(min_length, max_length).name

    def get_name(self, seed: int, min_length: int = 4, max_length: int = 16) -> str:
        """Generate a name determined by ``seed`` alone."""
        return self.get_result(seed, min_length, max_length).name

    def next_names(self, count: int, min_length: int = 4,
                   max_length: int = 12) -> List[str]:
        """Draw ``count`` consecutive names from the generator's stream."""
        return [self.next_name(min_length, max_length) for _ in range(count)]
