"""
Similarity tiers from normalized edit distance.

For every pair in the pool, the distances to all other pairs are scaled to
[0, 1] using that pair's own min/max and bucketed into three tiers:

- tier 0: very similar       (0 <= d <= similar)
- tier 1: somewhat similar   (similar < d <= dissimilar)
- tier 2: dissimilar         (dissimilar < d <= 1)

Tiers are computed once per run and never recomputed.
"""

from __future__ import annotations

from typing import Any, Sequence

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, model_validator

from src.contrasting.distance import DistanceFn, FormFn, foreign_form, levenshtein_distance
from src.contrasting.models import ContrastingConfigError, Entry


class TierThresholds(BaseModel):
    """Lower (exclusive) bounds of tier 1 and tier 2 on the normalized scale."""

    similar: float = Field(0.2, ge=0, le=1, description="Upper bound of tier 0")
    dissimilar: float = Field(0.5, ge=0, le=1, description="Upper bound of tier 1")

    @model_validator(mode="after")
    def _check_order(self) -> "TierThresholds":
        if self.similar >= self.dissimilar:
            raise ValueError(
                f"similar threshold ({self.similar}) must be below "
                f"dissimilar threshold ({self.dissimilar})"
            )
        return self

    @classmethod
    def build(cls, similar: float, dissimilar: float) -> "TierThresholds":
        """Create thresholds, converting validation failures to config errors."""
        try:
            return cls(similar=similar, dissimilar=dissimilar)
        except ValidationError as e:
            raise ContrastingConfigError(f"Invalid tier thresholds: {e}") from e

    def level_of(self, value: float) -> int:
        # Checked from the dissimilar end so boundary values fall to the more similar tier
        if value > self.dissimilar:
            return 2
        if value > self.similar:
            return 1
        return 0


DEFAULT_THRESHOLDS = TierThresholds()


def normalize_distances(raw: Sequence[int]) -> list[float]:
    """
    Scale raw distances to [0, 1] by their own min and max.

    When every distance is equal (including a single distance) there is no
    spread to scale, and every value is treated as maximally dissimilar.
    """
    if not raw:
        return []

    low = min(raw)
    high = max(raw)
    if high == low:
        return [1.0] * len(raw)

    span = high - low
    return [(d - low) / span for d in raw]


def compute_tiers(
    pair: Any,
    pool: Sequence[Any],
    distance: DistanceFn = levenshtein_distance,
    form: FormFn = foreign_form,
    thresholds: TierThresholds = DEFAULT_THRESHOLDS,
) -> tuple[list, list, list]:
    """
    Partition every other pool member into three similarity tiers.

    Args:
        pair: The pair whose neighbourhood is computed (skipped by identity)
        pool: All pairs in the exercise
        distance: Edit distance between two foreign forms
        form: Accessor for a pair's foreign form
        thresholds: Tier boundaries on the normalized scale

    Returns:
        Tuple of (tier0, tier1, tier2), each in pool order
    """
    others = [other for other in pool if other is not pair]
    own_form = form(pair)
    raw = [distance(own_form, form(other)) for other in others]

    tiers: tuple[list, list, list] = ([], [], [])
    for other, value in zip(others, normalize_distances(raw)):
        tiers[thresholds.level_of(value)].append(other)

    return tiers


def build_entries(
    pairs: Sequence[Any],
    distance: DistanceFn = levenshtein_distance,
    form: FormFn = foreign_form,
    thresholds: TierThresholds = DEFAULT_THRESHOLDS,
) -> list[Entry]:
    """Wrap each pair in an Entry with its precomputed tiers."""
    entries = [
        Entry(pair=pair, tiers=compute_tiers(pair, pairs, distance, form, thresholds))
        for pair in pairs
    ]

    logger.debug(
        f"Computed similarity tiers for {len(entries)} pairs "
        f"(similar<={thresholds.similar}, dissimilar>{thresholds.dissimilar})"
    )
    return entries
