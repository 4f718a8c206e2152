from itertools import combinations

import numpy as np
import pytest

from lotto.combinations import (
    format_subset,
    has_match,
    match_description,
    match_subsets,
    popcount,
    subset_count,
)
from lotto.history import Draw, DrawHistory


def brute_has_match(candidate, k, reference):
    for draw in reference:
        for subset in combinations(candidate, k):
            if set(subset) <= set(draw):
                return True
    return False


class TestHasMatch:
    def test_scenario_shared_pair(self, scenario_history):
        assert has_match([1, 2, 11, 12, 13, 14], 2, scenario_history)

    def test_scenario_no_shared_pair(self, scenario_history):
        assert not has_match([20, 21, 22, 23, 24, 25], 2, scenario_history)

    def test_empty_reference_never_matches(self):
        assert not has_match([1, 2, 3, 4, 5, 6], 1, DrawHistory())
        assert not has_match([1, 2, 3, 4, 5, 6], 2, [])

    def test_k_out_of_range(self, scenario_history):
        assert not has_match([1, 2, 3, 4, 5, 6], 0, scenario_history)
        assert not has_match([1, 2, 3, 4, 5, 6], 7, scenario_history)

    def test_k6_is_equality(self, scenario_history):
        assert has_match([6, 5, 4, 3, 2, 1], 6, scenario_history)
        assert not has_match([1, 2, 3, 4, 5, 7], 6, scenario_history)

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
    def test_agrees_with_brute_force(self, history, k):
        rng = np.random.RandomState(k)
        for _ in range(30):
            candidate = sorted(rng.choice(60, 6, replace=False) + 1)
            expected = brute_has_match(candidate, k, history)
            assert has_match(candidate, k, history) == expected
            # same answer against a plain list of draws (coupon path)
            assert has_match(Draw(candidate), k, list(history)) == expected

    def test_candidate_drawn_from_history_matches_k6(self, history):
        assert has_match(history[10], 6, history)


class TestCollector:
    def test_lists_shared_subsets(self):
        found = match_subsets([1, 2, 3, 7, 8, 9], 2, [1, 2, 3, 4, 5, 6])
        assert found == [(1, 2), (1, 3), (2, 3)]

    def test_table_insert_then_increment(self):
        table = {}
        match_subsets([1, 2, 7, 8, 9, 10], 2, [1, 2, 3, 4, 5, 6], table)
        match_subsets([2, 1, 11, 12, 13, 14], 2, [1, 2, 3, 4, 5, 6], table)
        assert table == {(1, 2): 2}

    def test_no_overlap_is_empty(self):
        assert match_subsets([1, 2, 3, 4, 5, 6], 3, [1, 2, 7, 8, 9, 10]) == []

    def test_description(self):
        assert match_description([1, 2, 7, 8, 9, 10], 2, [1, 2, 3, 4, 5, 6]) == "( 1, 2)"


def test_subset_count():
    assert subset_count(6, 2) == 15
    assert subset_count(6, 3) == 20
    assert subset_count(6, 6) == 1


def test_popcount():
    assert popcount(0) == 0
    assert popcount(0b1011) == 3


def test_format_subset():
    assert format_subset((1, 12, 40)) == "( 1,12,40)"
