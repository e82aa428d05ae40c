"""
Scheduling policies for the contrasting exercise.

Both policies share one engine that walks a shuffled pool round by round.
They differ only in how the contrasting level is chosen for a round:

- StaticPolicy: always level 2
- ProgressivePolicy: level taken from a per-round schedule

Run lifecycle:
    not started -> running -> finished

The first call starts round 0 without reshuffling. Every later call that
finds the cursor back at index 0 opens the next round (reshuffling the pool)
or, past the last round, finishes the run for good.
"""

from __future__ import annotations

import hashlib
import numbers
import random
from dataclasses import replace
from typing import Any, Iterator, Optional, Protocol, Sequence

from loguru import logger

from src.contrasting.distance import DistanceFn, FormFn, foreign_form, levenshtein_distance
from src.contrasting.exercise import ExerciseState
from src.contrasting.exposure import ExposureTracker
from src.contrasting.models import (
    LEVEL_COUNT,
    MIN_POOL_SIZE,
    STATIC_LEVEL,
    ContrastingConfigError,
    Entry,
    ExposureSummary,
    RunState,
    ScheduleUnderflowError,
    Trial,
)
from src.contrasting.selector import TrialSelector
from src.contrasting.similarity import DEFAULT_THRESHOLDS, TierThresholds, build_entries


class LevelResolver(Protocol):
    """Chooses the contrasting level for a round."""

    def level_for_round(self, round_number: int) -> int:
        ...


class StaticLevel:
    """Same level for every round."""

    def __init__(self, level: int = STATIC_LEVEL):
        _check_level(level)
        self.level = int(level)

    def level_for_round(self, round_number: int) -> int:
        return self.level


class ScheduledLevel:
    """
    Level looked up per round from a caller-supplied schedule.

    The schedule must have an entry for every round played; a short
    schedule raises ScheduleUnderflowError instead of being clamped.
    """

    def __init__(self, schedule: Sequence[int]):
        for level in schedule:
            _check_level(level)
        self.schedule = [int(level) for level in schedule]

    def level_for_round(self, round_number: int) -> int:
        if not 0 <= round_number < len(self.schedule):
            raise ScheduleUnderflowError(
                f"Level schedule has {len(self.schedule)} entries, "
                f"no level for round {round_number}"
            )
        return self.schedule[round_number]


def _check_level(level: int) -> None:
    if isinstance(level, bool) or not isinstance(level, numbers.Integral):
        raise ContrastingConfigError(f"Contrasting level must be an integer, got {level!r}")
    if not 0 <= level < LEVEL_COUNT:
        raise ContrastingConfigError(
            f"Contrasting level must be between 0 and {LEVEL_COUNT - 1}, got {level}"
        )


def _create_seed(seed: str | int) -> int:
    """Create a reproducible integer seed from string or int."""
    if isinstance(seed, int):
        return seed

    hash_bytes = hashlib.sha256(str(seed).encode()).digest()
    return int.from_bytes(hash_bytes[:8], "big")


class ContrastingEngine:
    """
    Produces contrasting trials from a fixed pool of pairs.

    Each trial is three pairs: the target at the cursor followed by two
    distractors at the round's contrasting level. Exposure is spread by
    always preferring the least-seen candidate.

    Not thread-safe; each exercise session needs its own engine.
    """

    def __init__(
        self,
        pairs: Sequence[Any],
        total_rounds: int,
        resolver: LevelResolver,
        *,
        distance: DistanceFn = levenshtein_distance,
        form: FormFn = foreign_form,
        thresholds: TierThresholds = DEFAULT_THRESHOLDS,
        seed: str | int | None = None,
        exercise: Optional[ExerciseState] = None,
    ):
        """
        Initialize the engine and precompute similarity tiers.

        Args:
            pairs: The exercise's pool (read once)
            total_rounds: Number of full passes through the pool
            resolver: Level chooser for each round
            distance: Edit distance between foreign forms
            form: Accessor for a pair's foreign form
            thresholds: Tier boundaries on the normalized scale
            seed: Optional seed for reproducible shuffles
            exercise: Optional state that receives level and pairs per trial

        Raises:
            ContrastingConfigError: Pool smaller than two pairs or no rounds
        """
        pairs = list(pairs)
        if len(pairs) < MIN_POOL_SIZE:
            raise ContrastingConfigError(
                f"Contrasting needs at least {MIN_POOL_SIZE} pairs, got {len(pairs)}"
            )
        if total_rounds < 1:
            raise ContrastingConfigError(f"total_rounds must be at least 1, got {total_rounds}")

        self.resolver = resolver
        self.exercise = exercise
        self._rng = random.Random(_create_seed(seed) if seed is not None else None)

        self._entries: list[Entry] = build_entries(pairs, distance, form, thresholds)
        self.tracker = ExposureTracker(self._entries)
        self.selector = TrialSelector(self.tracker)
        self._shuffle()

        self._state = RunState(max_rounds=total_rounds - 1)

        logger.info(
            f"Contrasting engine ready: {len(pairs)} pairs, {total_rounds} round(s), "
            f"resolver={type(resolver).__name__}"
        )

    @classmethod
    def from_exercise(
        cls,
        exercise: ExerciseState,
        total_rounds: int,
        resolver: LevelResolver,
        **kwargs: Any,
    ) -> "ContrastingEngine":
        """Build an engine over an exercise's pool that publishes back into it."""
        return cls(exercise.item_pairs, total_rounds, resolver, exercise=exercise, **kwargs)

    # ========================================
    # Views
    # ========================================

    @property
    def state(self) -> RunState:
        """Snapshot of the run bookkeeping."""
        return replace(self._state)

    @property
    def pool(self) -> list:
        """Pairs in the current round's order."""
        return [entry.pair for entry in self._entries]

    @property
    def pool_size(self) -> int:
        return len(self._entries)

    @property
    def finished(self) -> bool:
        return self._state.finished

    def entry_for(self, pair: Any) -> Entry:
        return self.tracker.entry_for(pair)

    def exposure_summary(self) -> ExposureSummary:
        return self.tracker.summary()

    # ========================================
    # Trial production
    # ========================================

    def next_trial(self) -> Optional[Trial]:
        """
        Produce the next trial, or None once all rounds are done.

        Raises:
            ScheduleUnderflowError: The resolver has no level for this round
        """
        state = self._state
        if state.finished:
            return None

        round_number = state.current_round
        new_round = state.initialized and state.current_index == 0
        if new_round:
            round_number += 1
            if round_number > state.max_rounds:
                state.current_round = round_number
                state.finished = True
                logger.info(f"Contrasting run finished after {state.max_rounds + 1} round(s)")
                return None

        # Resolve before touching state so a failed lookup can be retried
        level = self.resolver.level_for_round(round_number)

        state.initialized = True
        if new_round:
            state.current_round = round_number
            self._shuffle()
            logger.info(f"Starting round {round_number}")

        target = self._entries[state.current_index]
        pairs = self.selector.select(target, level)
        trial = Trial(
            level=level,
            pairs=pairs,
            round=state.current_round,
            index=state.current_index,
        )
        logger.debug(
            f"Round {trial.round} item {trial.index}: level {level}, "
            f"answer={pairs[0]!r}, distractors={pairs[1]!r}, {pairs[2]!r}"
        )

        if self.exercise is not None:
            self.exercise.publish(trial)

        state.current_index = (state.current_index + 1) % len(self._entries)
        return trial

    def advance(self) -> list:
        """
        Return the next three pairs, answer first.

        An empty list means the run is complete; every later call also
        returns an empty list.
        """
        trial = self.next_trial()
        if trial is None:
            return []
        return list(trial.pairs)

    def iter_trials(self) -> Iterator[Trial]:
        """Yield trials until the run finishes."""
        while True:
            trial = self.next_trial()
            if trial is None:
                return
            yield trial

    def _shuffle(self) -> None:
        self._rng.shuffle(self._entries)


class StaticPolicy(ContrastingEngine):
    """Contrasting at a fixed level (2) for every round."""

    def __init__(self, pairs: Sequence[Any], total_rounds: int, **kwargs: Any):
        super().__init__(pairs, total_rounds, StaticLevel(), **kwargs)


class ProgressivePolicy(ContrastingEngine):
    """Contrasting level advanced round by round along ``level_schedule``."""

    def __init__(
        self,
        pairs: Sequence[Any],
        total_rounds: int,
        level_schedule: Sequence[int],
        **kwargs: Any,
    ):
        super().__init__(pairs, total_rounds, ScheduledLevel(level_schedule), **kwargs)
        self.level_schedule = self.resolver.schedule
