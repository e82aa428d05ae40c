"""
Domain models for the contrasting exercise.

Holds the wrapped pool entries, the run bookkeeping and the trial output,
plus the exception hierarchy raised by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

# Pairs shown per trial: the answer plus two distractors
TRIAL_SIZE = 3
LEVEL_COUNT = 3
MIN_POOL_SIZE = 2

# Keys written into the exercise's custom data after every trial
CONTRASTING_LEVEL_KEY = "contrastingLevel"
CONTRASTED_PAIRS_KEY = "contrastedItemPairs"


class ContrastLevel(IntEnum):
    """Similarity tier index. Lower levels hold more similar pairs."""

    VERY_SIMILAR = 0
    SOMEWHAT_SIMILAR = 1
    DISSIMILAR = 2


STATIC_LEVEL = ContrastLevel.DISSIMILAR


# ========================================
# Errors
# ========================================


class ContrastingError(Exception):
    """Base class for all contrasting engine errors."""
    pass


class ContrastingConfigError(ContrastingError, ValueError):
    """Raised at construction when the pool or parameters cannot drive a run."""
    pass


class ScheduleUnderflowError(ContrastingError, IndexError):
    """Raised when a level schedule has no entry for the current round."""
    pass


class ExhaustedTierError(ContrastingError, LookupError):
    """Raised when a least-seen lookup receives no candidates."""
    pass


class UnknownPairError(ContrastingError, KeyError):
    """Raised when a pair is not part of the engine's pool."""
    pass


class VocabularyLoadError(ContrastingError):
    """Raised when a vocabulary file cannot be read or parsed."""
    pass


# ========================================
# Data classes
# ========================================


@dataclass(eq=False)
class ItemPair:
    """
    One translation pair.

    Compared by identity: two pairs with the same words are still two
    separate items in the pool.
    """

    source: str
    foreign: str

    def __repr__(self) -> str:
        return f"ItemPair({self.source!r} -> {self.foreign!r})"


@dataclass(eq=False)
class Entry:
    """
    A pool member wrapped with its exposure count and similarity tiers.

    ``contrasting_level`` is the level of the last trial the pair answered.
    """

    pair: Any
    tiers: tuple[list, list, list]
    seen_count: int = 0
    contrasting_level: int = 0

    def tier(self, level: int) -> list:
        return self.tiers[level]


@dataclass
class RunState:
    """Cursor and round bookkeeping for one run."""

    current_index: int = 0
    current_round: int = 0
    max_rounds: int = 0
    initialized: bool = False
    finished: bool = False


@dataclass(frozen=True)
class Trial:
    """
    One presentation of three pairs.

    ``pairs[0]`` is always the correct answer; the other two are
    distractors drawn at (or below) ``level``.
    """

    level: int
    pairs: tuple
    round: int
    index: int

    @property
    def answer(self) -> Any:
        return self.pairs[0]

    @property
    def distractors(self) -> tuple:
        return self.pairs[1:]


@dataclass
class ExposureSummary:
    """Aggregate exposure statistics over the pool."""

    pool_size: int
    total_exposures: int
    min_seen: int
    max_seen: int
    never_seen: int
    mean_seen: float = field(default=0.0)

    def to_dict(self) -> dict:
        return {
            "pool_size": self.pool_size,
            "total_exposures": self.total_exposures,
            "min_seen": self.min_seen,
            "max_seen": self.max_seen,
            "never_seen": self.never_seen,
            "mean_seen": round(self.mean_seen, 2),
        }
