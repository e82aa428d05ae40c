"""
Contrasting: distractor selection for vocabulary-pair exercises.

Each trial shows a target pair and two distractors whose foreign forms are
orthographically close to the target at a controlled difficulty level.

Components:
- similarity: normalized edit distance and the three similarity tiers
- exposure: seen counts and least-seen selection
- selector: level-bounded and overlap lookups for a full trial
- policies: StaticPolicy and ProgressivePolicy round scheduling
- vocabulary: CSV/YAML loading of translation pairs
"""

from src.contrasting.exercise import ExerciseState
from src.contrasting.exposure import ExposureTracker
from src.contrasting.models import (
    CONTRASTED_PAIRS_KEY,
    CONTRASTING_LEVEL_KEY,
    TRIAL_SIZE,
    ContrastingConfigError,
    ContrastingError,
    ContrastLevel,
    Entry,
    ExhaustedTierError,
    ItemPair,
    RunState,
    ScheduleUnderflowError,
    Trial,
    UnknownPairError,
    VocabularyLoadError,
)
from src.contrasting.policies import (
    ContrastingEngine,
    ProgressivePolicy,
    ScheduledLevel,
    StaticLevel,
    StaticPolicy,
)
from src.contrasting.selector import TrialSelector
from src.contrasting.similarity import TierThresholds, compute_tiers, normalize_distances
from src.contrasting.vocabulary import load_pairs

__all__ = [
    "CONTRASTED_PAIRS_KEY",
    "CONTRASTING_LEVEL_KEY",
    "TRIAL_SIZE",
    "ContrastLevel",
    "ContrastingConfigError",
    "ContrastingEngine",
    "ContrastingError",
    "Entry",
    "ExerciseState",
    "ExhaustedTierError",
    "ExposureTracker",
    "ItemPair",
    "ProgressivePolicy",
    "RunState",
    "ScheduleUnderflowError",
    "ScheduledLevel",
    "StaticLevel",
    "StaticPolicy",
    "TierThresholds",
    "Trial",
    "TrialSelector",
    "UnknownPairError",
    "VocabularyLoadError",
    "compute_tiers",
    "load_pairs",
    "normalize_distances",
]
