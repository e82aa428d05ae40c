"""
Edit-distance helpers.

The engine only needs a pure ``distance(a, b) -> int``; the default is the
Levenshtein distance from rapidfuzz.
"""

from __future__ import annotations

from typing import Any, Callable

from rapidfuzz.distance import Levenshtein

DistanceFn = Callable[[str, str], int]
FormFn = Callable[[Any], str]


def levenshtein_distance(a: str, b: str) -> int:
    """Number of single-character edits turning ``a`` into ``b``."""
    return Levenshtein.distance(a, b)


def foreign_form(pair: Any) -> str:
    """Default accessor: the foreign-language side of a pair."""
    return pair.foreign
