"""
Unit tests for vocabulary file loading.
"""

import pytest

from src.contrasting.models import ItemPair, VocabularyLoadError
from src.contrasting.vocabulary import load_pairs


class TestCsv:
    def test_loads_rows_in_order(self, tmp_path):
        path = tmp_path / "vocab.csv"
        path.write_text("source,foreign\nhouse,huis\nmouse, muis\n", encoding="utf-8")

        pairs = load_pairs(path)

        assert [(p.source, p.foreign) for p in pairs] == [("house", "huis"), ("mouse", "muis")]
        assert all(isinstance(p, ItemPair) for p in pairs)

    def test_extra_columns_ignored(self, tmp_path):
        path = tmp_path / "vocab.csv"
        path.write_text("source,foreign,notes\nhouse,huis,noun\n", encoding="utf-8")

        assert load_pairs(path)[0].foreign == "huis"

    def test_missing_column(self, tmp_path):
        path = tmp_path / "vocab.csv"
        path.write_text("english,dutch\nhouse,huis\n", encoding="utf-8")

        with pytest.raises(VocabularyLoadError, match="missing column"):
            load_pairs(path)

    def test_empty_foreign_rejected(self, tmp_path):
        path = tmp_path / "vocab.csv"
        path.write_text("source,foreign\nhouse,\n", encoding="utf-8")

        with pytest.raises(VocabularyLoadError, match="Entry 1"):
            load_pairs(path)


class TestYaml:
    def test_list_of_mappings(self, tmp_path):
        path = tmp_path / "vocab.yaml"
        path.write_text(
            "- source: house\n  foreign: huis\n- source: cheese\n  foreign: kaas\n",
            encoding="utf-8",
        )

        pairs = load_pairs(path)
        assert [p.foreign for p in pairs] == ["huis", "kaas"]

    def test_pairs_key(self, tmp_path):
        path = tmp_path / "vocab.yml"
        path.write_text(
            "language: nl\npairs:\n  - {source: chair, foreign: stoel}\n",
            encoding="utf-8",
        )

        assert load_pairs(path)[0].source == "chair"

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "vocab.yaml"
        path.write_text("language: nl\n", encoding="utf-8")

        with pytest.raises(VocabularyLoadError):
            load_pairs(path)

    def test_entry_not_a_mapping(self, tmp_path):
        path = tmp_path / "vocab.yaml"
        path.write_text("- huis\n", encoding="utf-8")

        with pytest.raises(VocabularyLoadError, match="expected a mapping"):
            load_pairs(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "vocab.yaml"
        path.write_text("- source: [unclosed\n", encoding="utf-8")

        with pytest.raises(VocabularyLoadError, match="Cannot parse"):
            load_pairs(path)


class TestErrors:
    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "vocab.txt"
        path.write_text("huis\n", encoding="utf-8")

        with pytest.raises(VocabularyLoadError, match="Unsupported"):
            load_pairs(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(VocabularyLoadError, match="Cannot read"):
            load_pairs(tmp_path / "absent.csv")
