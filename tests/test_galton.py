import numpy as np
import pytest

from lotto.galton import InvalidDomain, distribution_check, gauss_index, right_probability


@pytest.mark.parametrize("n", [1, 2, 6, 30, 60, 90])
def test_index_in_range(rng, n):
    for _ in range(300):
        assert 1 <= gauss_index(n, rng) <= n


def test_single_ball_domain(rng):
    assert all(gauss_index(1, rng) == 1 for _ in range(20))


@pytest.mark.parametrize("n", [0, -1])
def test_invalid_domain(rng, n):
    with pytest.raises(InvalidDomain):
        gauss_index(n, rng)


def test_invalid_domain_is_value_error(rng):
    with pytest.raises(ValueError):
        gauss_index(0, rng)


def test_right_probability():
    assert right_probability() == pytest.approx(0.505)


def test_mean_near_center(rng):
    samples = np.array([gauss_index(60, rng) for _ in range(5000)])
    expected = 1 + 59 * right_probability()
    assert abs(samples.mean() - expected) < 0.3
    assert abs(samples.mean() - 30.5) < 1.0


def test_centre_favoured_over_edges(rng):
    samples = np.array([gauss_index(60, rng) for _ in range(5000)])
    centre = np.sum((samples >= 26) & (samples <= 35))
    edges = np.sum((samples <= 10) | (samples >= 51))
    assert centre > 10 * max(edges, 1)


def test_distribution_check(rng):
    result = distribution_check(30, 4000, rng)
    assert result["counts"].sum() == 4000
    assert len(result["counts"]) == 30
    assert result["center"] == 15.5
    assert abs(result["skewness"]) < 0.2
    assert result["p_value"] > 1e-4


def test_distribution_check_invalid(rng):
    with pytest.raises(InvalidDomain):
        distribution_check(0, 10, rng)
