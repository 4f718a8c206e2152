import pytest

from lotto.analysis import ball_stats
from lotto.globe import (
    STRATEGIES,
    arrange_globe,
    blend1_globe,
    blend2_globe,
    left_globe,
    norm_globe,
    ranked_balls,
    side_globe,
)

STATS4 = {1: 5, 2: 1, 3: 3, 4: 2}


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_globe_is_permutation(history, rng, strategy):
    stats = ball_stats(history, 60)
    globe = arrange_globe(strategy, stats, rng)
    assert sorted(globe) == list(range(1, 61))


def test_norm_centres_most_frequent():
    stats = {n: 50 for n in range(1, 61)}
    stats[1] = 100
    stats[60] = 0
    globe = norm_globe(stats)
    assert globe.index(1) == 30
    assert globe.index(60) == 0


def test_ranked_ties_by_ball():
    assert ranked_balls({3: 1, 1: 1, 2: 1}) == [1, 2, 3]
    assert ranked_balls({3: 1, 1: 1, 2: 2}, descending=True) == [2, 1, 3]


def test_left_is_ascending_frequency():
    assert left_globe(STATS4) == [2, 4, 3, 1]


def test_blend1_meets_at_centre():
    assert blend1_globe(STATS4) == [4, 2, 1, 3]


def test_blend2_interleaves():
    assert blend2_globe(STATS4) == [2, 1, 4, 3]
    assert blend2_globe({1: 1, 2: 2, 3: 3}) == [1, 3, 2]


def test_side_pushes_frequent_to_edges():
    globe = side_globe(STATS4)
    assert globe == [1, 4, 2, 3]
    assert {globe[0], globe[-1]} == {1, 3}


def test_unknown_strategy():
    with pytest.raises(ValueError):
        arrange_globe("hot", STATS4)


def test_random_needs_rng():
    with pytest.raises(ValueError):
        arrange_globe("random", STATS4)
