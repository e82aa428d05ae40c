"""
Exposure tracking for pool entries.

Keeps an identity index from pair to entry and implements the least-seen
pick used to spread exposure across the pool.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from src.contrasting.models import (
    Entry,
    ExhaustedTierError,
    ExposureSummary,
    UnknownPairError,
)


class ExposureTracker:
    """
    Seen counts for every entry in the pool.

    Pairs are looked up by identity (``id``), so pairs do not need to be
    hashable and two equal-looking pairs stay distinct.
    """

    def __init__(self, entries: Sequence[Entry]):
        self._entries = list(entries)
        self._index: dict[int, Entry] = {id(entry.pair): entry for entry in self._entries}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pair: Any) -> bool:
        return id(pair) in self._index

    def entry_for(self, pair: Any) -> Entry:
        try:
            return self._index[id(pair)]
        except KeyError:
            raise UnknownPairError(f"{pair!r} is not part of this pool") from None

    def seen_count(self, pair: Any) -> int:
        return self.entry_for(pair).seen_count

    def mark_seen(self, pair: Any) -> Entry:
        """Record one more exposure of ``pair``."""
        entry = self.entry_for(pair)
        entry.seen_count += 1
        return entry

    def least_seen(self, candidates: Iterable[Any]) -> Any:
        """
        Return the candidate with the lowest seen count.

        Ties keep the earliest candidate in input order.

        Raises:
            ExhaustedTierError: If there are no candidates
        """
        pick = None
        pick_count = 0

        for candidate in candidates:
            count = self.entry_for(candidate).seen_count
            if pick is None or count < pick_count:
                pick = candidate
                pick_count = count

        if pick is None:
            raise ExhaustedTierError("No candidates to choose a least-seen pair from")
        return pick

    def summary(self) -> ExposureSummary:
        counts = [entry.seen_count for entry in self._entries]
        total = sum(counts)
        return ExposureSummary(
            pool_size=len(counts),
            total_exposures=total,
            min_seen=min(counts, default=0),
            max_seen=max(counts, default=0),
            never_seen=sum(1 for c in counts if c == 0),
            mean_seen=total / len(counts) if counts else 0.0,
        )
