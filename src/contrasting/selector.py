"""
Trial selection shared by both scheduling policies.

A trial is built from the target plus two distractors:
1. The second pair comes from the target's tier at the requested level
2. The third pair must sit in the same tier for both the target and the
   second pair, so all three items are consistent in difficulty

Both lookups start at the requested level and fall back towards level 0
(more similar tiers) until a candidate exists.
"""

from __future__ import annotations

from typing import Any, Collection

from loguru import logger

from src.contrasting.exposure import ExposureTracker
from src.contrasting.models import LEVEL_COUNT, Entry


class TrialSelector:
    """Choose target and distractors for one trial."""

    def __init__(self, tracker: ExposureTracker):
        self.tracker = tracker

    def pair_at_level(
        self,
        entry: Entry,
        start_level: int,
        exclude: Collection[Any] = (),
    ) -> Any:
        """
        Least-seen pair from the first non-empty tier at or below ``start_level``.

        If every tier from ``start_level`` down to 0 is empty (possible when
        all distances from ``entry`` are equal), the search widens to the
        levels above ``start_level``.

        Args:
            entry: Entry whose tiers are searched
            start_level: Level to try first
            exclude: Pairs that must not be returned

        Returns:
            The chosen pair
        """
        excluded = {id(pair) for pair in exclude}

        for level in self._search_order(start_level):
            candidates = [pair for pair in entry.tier(level) if id(pair) not in excluded]
            if candidates:
                if level > start_level:
                    logger.warning(
                        f"No pair for {entry.pair!r} at or below level {start_level}, "
                        f"using level {level}"
                    )
                return self.tracker.least_seen(candidates)

        # Only reachable when everything else is excluded (a pool of two)
        return self.tracker.least_seen(
            pair for level in self._search_order(start_level) for pair in entry.tier(level)
        )

    def overlap_at_level(self, entry_a: Entry, entry_b: Entry, start_level: int) -> Any:
        """
        Least-seen pair that shares a tier with both entries.

        Scans ``start_level`` down to 0 and picks from the first level where
        the two entries' tiers intersect. When no level intersects, falls
        back to ``pair_at_level`` on ``entry_a`` with ``entry_b``'s pair
        excluded. This is not a plain least-seen pick from ``entry_a``'s
        level-0 tier: that pick could return ``entry_b``'s pair again and
        show the same distractor twice in one trial.
        """
        for level in range(start_level, -1, -1):
            in_b = {id(pair) for pair in entry_b.tier(level)}
            common = [pair for pair in entry_a.tier(level) if id(pair) in in_b]
            if common:
                return self.tracker.least_seen(common)

        logger.warning(
            f"No common pair for {entry_a.pair!r} and {entry_b.pair!r} "
            f"at or below level {start_level}"
        )
        return self.pair_at_level(entry_a, start_level, exclude=(entry_b.pair,))

    def select(self, target: Entry, level: int) -> tuple[Any, Any, Any]:
        """
        Build a full trial around ``target``.

        Each chosen pair has its seen count incremented as soon as it is
        picked, so later picks in the same trial see the update.

        Returns:
            Tuple of (answer, distractor, distractor)
        """
        target.seen_count += 1
        target.contrasting_level = level

        second = self.pair_at_level(target, level)
        second_entry = self.tracker.mark_seen(second)

        third = self.overlap_at_level(target, second_entry, level)
        self.tracker.mark_seen(third)

        return target.pair, second, third

    @staticmethod
    def _search_order(start_level: int) -> list[int]:
        downward = list(range(start_level, -1, -1))
        upward = list(range(start_level + 1, LEVEL_COUNT))
        return downward + upward
