"""
Unit tests for similarity tier computation.

Covers normalization, the three-way partition and threshold boundaries.
"""

import pytest

from src.contrasting.models import ContrastingConfigError, ItemPair
from src.contrasting.similarity import (
    TierThresholds,
    build_entries,
    compute_tiers,
    normalize_distances,
)


class TestNormalizeDistances:
    def test_scales_by_min_and_max(self):
        assert normalize_distances([1, 5, 9]) == [0.0, 0.5, 1.0]

    def test_equal_distances_are_maximally_dissimilar(self):
        assert normalize_distances([3, 3, 3]) == [1.0, 1.0, 1.0]

    def test_single_distance(self):
        assert normalize_distances([7]) == [1.0]

    def test_empty(self):
        assert normalize_distances([]) == []


class TestComputeTiers:
    def test_concrete_scenario(self, abcd_pairs, abcd_distance):
        """A's neighbours at 1, 5, 9 land in tier 0, 1 and 2."""
        a, b, c, d = abcd_pairs
        tier0, tier1, tier2 = compute_tiers(a, abcd_pairs, abcd_distance)

        assert tier0 == [b]
        assert tier1 == [c]
        assert tier2 == [d]

    def test_partitions_rest_of_pool(self, dutch_pairs):
        """Every other pair appears in exactly one tier; the pair itself never."""
        for pair in dutch_pairs:
            tiers = compute_tiers(pair, dutch_pairs)
            members = [p for tier in tiers for p in tier]

            assert all(p is not pair for p in members)
            assert len(members) == len(dutch_pairs) - 1
            assert {id(p) for p in members} == {id(p) for p in dutch_pairs if p is not pair}

    def test_equal_distances_all_dissimilar(self):
        """When every distance is the same, all pairs go to tier 2."""
        pairs = [ItemPair("one", "aa"), ItemPair("two", "bb"), ItemPair("three", "cc")]
        tier0, tier1, tier2 = compute_tiers(pairs[0], pairs)

        assert tier0 == []
        assert tier1 == []
        assert tier2 == pairs[1:]

    def test_two_pair_pool(self):
        a, b = ItemPair("one", "een"), ItemPair("two", "twee")
        assert compute_tiers(a, [a, b]) == ([], [], [b])

    def test_lower_boundary_falls_to_more_similar_tier(self, table_distance):
        """A normalized distance of exactly 0.2 stays in tier 0."""
        pairs = [ItemPair("x", f) for f in ("P", "Q", "R", "S")]
        distance = table_distance({
            ("P", "Q"): 0,
            ("P", "R"): 2,
            ("P", "S"): 10,
            ("Q", "R"): 1,
            ("Q", "S"): 1,
            ("R", "S"): 1,
        })
        tier0, tier1, tier2 = compute_tiers(pairs[0], pairs, distance)

        assert tier0 == [pairs[1], pairs[2]]
        assert tier1 == []
        assert tier2 == [pairs[3]]

    def test_tier_order_follows_pool_order(self, table_distance):
        """Members keep pool order, not distance order."""
        pairs = [ItemPair("x", f) for f in ("P", "Q", "R", "S", "T")]
        distance = table_distance({
            ("P", "Q"): 10,
            ("P", "R"): 0,
            ("P", "S"): 9,
            ("P", "T"): 8,
            ("Q", "R"): 1,
            ("Q", "S"): 1,
            ("Q", "T"): 1,
            ("R", "S"): 1,
            ("R", "T"): 1,
            ("S", "T"): 1,
        })
        _, _, tier2 = compute_tiers(pairs[0], pairs, distance)

        assert tier2 == [pairs[1], pairs[3], pairs[4]]

    def test_identical_pairs_are_distinct_items(self):
        """Pairs are compared by identity, so a duplicate word is still a neighbour."""
        first, second, other = ItemPair("a", "huis"), ItemPair("a", "huis"), ItemPair("b", "kaas")
        tier0, _, tier2 = compute_tiers(first, [first, second, other])

        assert tier0 == [second]
        assert tier2 == [other]

    def test_custom_form_accessor(self):
        pairs = [ItemPair("house", "huis"), ItemPair("mouse", "muis"), ItemPair("chair", "stoel")]
        tiers = compute_tiers(pairs[0], pairs, form=lambda p: p.source)

        assert tiers[0] == [pairs[1]]
        assert tiers[2] == [pairs[2]]

    def test_custom_thresholds(self, abcd_pairs, abcd_distance):
        """Raising the similar bound pulls C (0.5) into tier 0."""
        a, b, c, d = abcd_pairs
        thresholds = TierThresholds(similar=0.5, dissimilar=0.9)
        tier0, tier1, tier2 = compute_tiers(a, abcd_pairs, abcd_distance, thresholds=thresholds)

        assert tier0 == [b, c]
        assert tier1 == []
        assert tier2 == [d]


class TestTierThresholds:
    def test_defaults(self):
        thresholds = TierThresholds()
        assert thresholds.similar == 0.2
        assert thresholds.dissimilar == 0.5

    @pytest.mark.parametrize(
        "value,level",
        [(0.0, 0), (0.2, 0), (0.21, 1), (0.5, 1), (0.51, 2), (1.0, 2)],
    )
    def test_level_of(self, value, level):
        assert TierThresholds().level_of(value) == level

    def test_build_rejects_inverted_bounds(self):
        with pytest.raises(ContrastingConfigError):
            TierThresholds.build(similar=0.6, dissimilar=0.5)

    def test_build_rejects_out_of_range(self):
        with pytest.raises(ContrastingConfigError):
            TierThresholds.build(similar=0.2, dissimilar=1.5)


class TestBuildEntries:
    def test_one_entry_per_pair(self, dutch_pairs):
        entries = build_entries(dutch_pairs)

        assert [e.pair for e in entries] == dutch_pairs
        assert all(e.seen_count == 0 for e in entries)

    def test_near_homographs_are_very_similar(self, dutch_pairs):
        """huis/muis/luis differ by one letter and share tier 0."""
        entries = build_entries(dutch_pairs)
        huis = entries[0]

        assert {p.foreign for p in huis.tier(0)} == {"muis", "luis"}
