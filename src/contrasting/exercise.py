"""
Exercise state shared with the contrasting engine.

The exercise owns the vocabulary pool and a free-form ``custom_data`` store.
The engine reads the pool once and writes the active level and the chosen
pairs after every trial; it never reads those keys back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from src.contrasting.models import CONTRASTED_PAIRS_KEY, CONTRASTING_LEVEL_KEY, Trial


@dataclass
class ExerciseState:
    """Pool of pairs plus the values published for the presentation layer."""

    item_pairs: Sequence[Any]
    custom_data: dict[str, Any] = field(default_factory=dict)

    def publish(self, trial: Trial) -> None:
        self.custom_data[CONTRASTING_LEVEL_KEY] = trial.level
        self.custom_data[CONTRASTED_PAIRS_KEY] = list(trial.pairs)

    @property
    def contrasting_level(self) -> Optional[int]:
        return self.custom_data.get(CONTRASTING_LEVEL_KEY)

    @property
    def contrasted_pairs(self) -> list:
        return self.custom_data.get(CONTRASTED_PAIRS_KEY, [])
