"""
Random Shuffle Strategy

No fixed arrangement: before every extraction the globe is churned by
many random relocations (balls left of the middle fly to the front, the
rest to the back, the two middle slots stay put) and the ball sitting in
the structural middle is taken directly, without the Galton sampler.
"""
import math

from lotto.filters import history_passes
from lotto.globe import random_globe
from lotto.history import Draw

LABEL = "(random)"


def churn_count(total_ball, rng, scale):
    """Relocations before one extraction: N^3 * U{1..3} / (N // 3), scaled."""
    full = total_ball ** 3 * (rng.randint(0, 3) + 1) / max(total_ball // 3, 1)
    return max(int(math.ceil(full * scale)), 1)


def churn(globe, count, rng, half=None):
    """
    Relocate `count` randomly chosen balls in place.

    `half` is the midpoint of the full globe; it stays fixed while balls
    are extracted and the globe shrinks.
    """
    size = len(globe)
    if half is None:
        half = size // 2
    for index in rng.randint(0, size, size=count):
        if index == half - 1 or index == half:
            continue
        ball = globe.pop(index)
        if index < half - 1:
            globe.insert(0, ball)
        else:
            globe.append(ball)


def _return_balls(globe, drawn):
    """Put drawn balls back, alternately at the front and the back."""
    lo, hi = 0, len(drawn) - 1
    for z in range(len(drawn)):
        if z % 2:
            globe.append(drawn[hi])
            hi -= 1
        else:
            globe.insert(0, drawn[lo])
            lo += 1


def draw_by_rand(stats, history, config, rng, match_comb=0, elim_comb=0,
                 verbose=False):
    """
    Draw by churn-and-take-the-middle, retried up to 3 x draw_ball times.

    Returns
    -------
    Draw sorted ascending; `relaxed` is set when no attempt passed.
    """
    draw_ball = config.draw_ball
    globe = random_globe(stats, rng)
    total = len(globe)

    drawn = []
    for _ in range(draw_ball * 3):
        drawn = []
        for _ in range(draw_ball):
            churn(globe, churn_count(total, rng, config.churn_scale), rng, half=total // 2)
            drawn.append(globe.pop(len(globe) // 2))
        _return_balls(globe, drawn)

        if history_passes(drawn, history, match_comb, elim_comb):
            return Draw(sorted(drawn), label=LABEL)

    if verbose:
        print(f"  [Draw] {LABEL}: no attempt passed match={match_comb} "
              f"elim={elim_comb}, keeping best effort")
    return Draw(sorted(drawn), label=LABEL, relaxed=True)
