#!/usr/bin/env python3
"""
Second-Order Character Markov Chain
===================================
Learns character transitions from example names and walks the chain to
produce new ones.

The model looks two characters back: the weight of every candidate ``next``
symbol is stored per history pair ``(prev_prev, prev)`` in a dense table
indexed ``[next][prev][prev_prev]``, most recent symbol first. Raw counts are
kept as-is and read as unnormalized weights during sampling.

A reserved TERMINATOR symbol fills the history at the start of a walk and
marks where training strings end, so the model learns both how names begin
and where they may stop.

The model itself is immutable after ``build()``. Per-walk state (history
cursor and random source) lives in ``ChainCursor`` / ``MarkovChain``, so one
model can serve any number of independent generation streams.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple, Union

from .random_source import RandomSource

logger = logging.getLogger(__name__)

TERMINATOR = '\0'

History = Tuple[str, str]


# =============================================================================
# Alphabet
# =============================================================================

@dataclass(frozen=True)
class Alphabet:
    """Ordered symbol set with a fixed symbol -> index mapping."""
    symbols: Tuple[str, ...]
    index: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'index', {s: i for i, s in enumerate(self.symbols)})

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> 'Alphabet':
        """
        Collect the lower-cased characters used in ``strings``.

        Symbols are ordered by code point so that the same corpus always
        yields the same indices; TERMINATOR is always appended last.
        """
        chars = set()
        for s in strings:
            chars.update(s.lower())
        chars.discard(TERMINATOR)
        return cls(tuple(sorted(chars)) + (TERMINATOR,))

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self.index

    def __iter__(self):
        return iter(self.symbols)


# =============================================================================
# Transition Model
# =============================================================================

class TransitionModel:
    """Alphabet plus transition counts ``table[next][prev][prev_prev]``."""

    def __init__(self, alphabet: Alphabet, table):
        self._alphabet = alphabet
        # freeze to nested tuples, the model is shared read-only
        self._table = tuple(tuple(tuple(row) for row in plane) for plane in table)

    @classmethod
    def build(cls, training_strings: Iterable[str]) -> 'TransitionModel':
        """Count every (prev_prev, prev) -> next transition in the corpus."""
        names = list(training_strings)
        alphabet = Alphabet.from_strings(names)
        size = len(alphabet)
        table = [[[0] * size for _ in range(size)] for _ in range(size)]

        for name in names:
            _count_transitions(table, alphabet, name)

        logger.debug(f"Trained transition model on {len(names)} strings, "
                     f"alphabet of {size} symbols")
        return cls(alphabet, table)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._alphabet.symbols

    @property
    def table(self):
        return self._table

    def count(self, next_symbol: str, prev_prev: str, prev: str) -> int:
        idx = self._alphabet.index
        return self._table[idx[next_symbol]][idx[prev]][idx[prev_prev]]

    def weights(self, prev_prev: str, prev: str) -> List[int]:
        """Weights of every candidate next symbol, in alphabet order."""
        idx = self._alphabet.index
        pp, p = idx[prev_prev], idx[prev]
        return [plane[p][pp] for plane in self._table]

    def next_symbol(self,
                    history: Union['ChainCursor', History],
                    rng: RandomSource) -> str:
        """
        Draw the symbol following ``history`` with a weighted random choice.

        A history pair never seen in training has all-zero weights; the walk
        then ends with TERMINATOR.
        """
        if isinstance(history, ChainCursor):
            history = history.pair
        weights = self.weights(*history)
        total = sum(weights)
        if total <= 0:
            return TERMINATOR

        draw = rng.random() * total
        running = 0
        last = TERMINATOR
        for symbol, weight in zip(self.symbols, weights):
            if weight <= 0:
                continue
            running += weight
            last = symbol
            if running > draw:
                return symbol
        return last

    def __eq__(self, other) -> bool:
        if not isinstance(other, TransitionModel):
            return NotImplemented
        return self._alphabet == other._alphabet and self._table == other._table

    def __repr__(self) -> str:
        return f"TransitionModel(alphabet_size={len(self._alphabet)})"


def _count_transitions(table: list, alphabet: Alphabet, name: str):
    """Add one name's transitions, including the final one into TERMINATOR."""
    idx = alphabet.index
    prev_prev = prev = TERMINATOR
    for char in name.lower():
        if char not in idx:
            continue
        table[idx[char]][idx[prev]][idx[prev_prev]] += 1
        prev_prev, prev = prev, char
    table[idx[TERMINATOR]][idx[prev]][idx[prev_prev]] += 1


# =============================================================================
# Walking the chain
# =============================================================================

@dataclass
class ChainCursor:
    """The two most recent symbols of one walk."""
    prev_prev: str = TERMINATOR
    prev: str = TERMINATOR

    @property
    def pair(self) -> History:
        return (self.prev_prev, self.prev)

    def advance(self, symbol: str):
        self.prev_prev, self.prev = self.prev, symbol

    def reset(self):
        self.prev_prev = self.prev = TERMINATOR


class MarkovChain:
    """
    A single walk over a shared TransitionModel.

    Holds its own history cursor and random source; create one per
    generation call (or per thread) rather than sharing it.
    """

    def __init__(self, model: TransitionModel, rng: RandomSource):
        self.model = model
        self.rng = rng
        self.cursor = ChainCursor()

    def set_random(self, rng: RandomSource):
        self.rng = rng

    def reset_history(self):
        self.cursor.reset()

    def next(self) -> str:
        """Draw the next symbol and move the history forward."""
        symbol = self.model.next_symbol(self.cursor, self.rng)
        self.cursor.advance(symbol)
        return symbol
