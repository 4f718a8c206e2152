"""
Weighted Index Sampler (Galton board)

A ball dropped through a Galton board of N-1 levels lands in one of N
bins. At every level the ball goes left with probability ~49.5% and right
otherwise, so the landing bin follows a shifted Binomial(N-1, ~0.505):
unimodal, centred on (N+1)/2, explicitly non-uniform. Strategies use it
to favour the middle of their globe.
"""
import numpy as np
from scipy import stats

from lotto.config import GAUSS_LEFT_BASE, GAUSS_LEFT_JITTER


class InvalidDomain(ValueError):
    """Sampler asked for an index over an empty domain."""


def gauss_index(ball_count, rng, left_base=GAUSS_LEFT_BASE, left_jitter=GAUSS_LEFT_JITTER):
    """
    Drop one ball through a board with `ball_count` - 1 levels.

    Returns
    -------
    int in [1, ball_count]
    """
    if ball_count <= 0:
        raise InvalidDomain(f"ball_count must be positive, got {ball_count}")

    levels = np.arange(1, ball_count, dtype=np.int64)
    rolls = rng.randint(0, 100, size=ball_count - 1)
    thresholds = left_base + rng.randint(0, left_jitter, size=ball_count - 1)

    # left adds the level index, right adds level + 1
    node = np.where(rolls < thresholds, levels, levels + 1).sum()
    leftnode = levels.sum()
    return int(node - (leftnode - 1))


def right_probability(left_base=GAUSS_LEFT_BASE, left_jitter=GAUSS_LEFT_JITTER):
    """Per-level probability of falling right."""
    p_left = np.mean([(left_base + j) / 100.0 for j in range(left_jitter)])
    return 1.0 - p_left


def distribution_check(ball_count, trials, rng, left_base=GAUSS_LEFT_BASE,
                       left_jitter=GAUSS_LEFT_JITTER):
    """
    Compare the sampler's empirical distribution with the binomial it simulates.

    Returns
    -------
    dict with:
        counts      : np.array, hits per index 1..ball_count
        expected    : np.array, binomial expectation per index
        mean, center, skewness : float
        chi2, p_value : chi-square goodness of fit (bins with
                        expectation < 5 are pooled into the tails)
    """
    if ball_count <= 0:
        raise InvalidDomain(f"ball_count must be positive, got {ball_count}")

    samples = np.array([gauss_index(ball_count, rng, left_base, left_jitter)
                        for _ in range(trials)])
    counts = np.bincount(samples, minlength=ball_count + 1)[1:]

    p_right = right_probability(left_base, left_jitter)
    pmf = stats.binom.pmf(np.arange(ball_count), ball_count - 1, p_right)
    expected = pmf / pmf.sum() * trials

    # Pool sparse tail bins so the chi-square approximation holds
    keep = expected >= 5
    if keep.sum() >= 2:
        obs = np.append(counts[keep], counts[~keep].sum())
        exp = np.append(expected[keep], expected[~keep].sum())
        if exp[-1] == 0:
            obs, exp = obs[:-1], exp[:-1]
        exp = exp * obs.sum() / exp.sum()
        chi2, p_value = stats.chisquare(obs, exp)
    else:
        chi2, p_value = float("nan"), float("nan")

    return {
        "counts": counts,
        "expected": expected,
        "mean": float(samples.mean()),
        "center": (ball_count + 1) / 2.0,
        "skewness": float(stats.skew(samples)) if ball_count > 1 else 0.0,
        "chi2": float(chi2),
        "p_value": float(p_value),
    }
