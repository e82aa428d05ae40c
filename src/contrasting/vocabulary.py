"""
Vocabulary file loading.

Supported formats:
- CSV with a ``source,foreign`` header
- YAML: a list of ``{source, foreign}`` mappings, or a mapping with a
  ``pairs`` key holding that list
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from src.contrasting.models import ItemPair, VocabularyLoadError


class VocabularyRow(BaseModel):
    """One translation pair as read from a file."""

    source: str = Field(..., min_length=1, description="Word in the learner's language")
    foreign: str = Field(..., min_length=1, description="Word in the language being learned")


def load_pairs(path: str | Path) -> list[ItemPair]:
    """
    Load translation pairs from a CSV or YAML file.

    Args:
        path: Vocabulary file

    Returns:
        List of ItemPair in file order

    Raises:
        VocabularyLoadError: Unreadable file, unknown format or bad rows
    """
    path = Path(path)
    suffix = path.suffix.lower()

    try:
        if suffix == ".csv":
            rows = _read_csv(path)
        elif suffix in (".yaml", ".yml"):
            rows = _read_yaml(path)
        else:
            raise VocabularyLoadError(f"Unsupported vocabulary format: {path.suffix or path.name}")
    except OSError as e:
        raise VocabularyLoadError(f"Cannot read {path}: {e}") from e
    except (csv.Error, yaml.YAMLError) as e:
        raise VocabularyLoadError(f"Cannot parse {path}: {e}") from e

    pairs = [_to_pair(row, line) for line, row in enumerate(rows, start=1)]
    logger.info(f"Loaded {len(pairs)} pairs from {path}")
    return pairs


def _read_csv(path: Path) -> list[dict[str, Any]]:
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = {"source", "foreign"} - set(reader.fieldnames or [])
        if missing:
            raise VocabularyLoadError(
                f"{path} is missing column(s): {', '.join(sorted(missing))}"
            )
        return [
            {key: (value or "").strip() for key, value in row.items() if key}
            for row in reader
        ]


def _read_yaml(path: Path) -> list[Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("pairs")
    if not isinstance(data, list):
        raise VocabularyLoadError(f"{path} must contain a list of pairs")
    return data


def _to_pair(row: Any, line: int) -> ItemPair:
    if not isinstance(row, dict):
        raise VocabularyLoadError(f"Entry {line}: expected a mapping, got {type(row).__name__}")
    try:
        parsed = VocabularyRow.model_validate(row)
    except ValidationError as e:
        raise VocabularyLoadError(f"Entry {line}: {e}") from e
    return ItemPair(source=parsed.source, foreign=parsed.foreign)
