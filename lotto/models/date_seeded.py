"""
Date-Seeded Strategy

Numerology, not statistics: an integer derived from the days elapsed
since a fixed reference date is cut into two-digit chunks and folded
into the ball domain, giving two draws per day. Collisions inside a draw
are replaced by Galton picks from a blend globe.

The digit manipulation is fixed; `seed_fn` can swap in any other
deterministic seed.
"""
import math
from datetime import date

from lotto.globe import random_globe
from lotto.history import Draw
from lotto.models.gauss_draw import gauss_pick

LABELS = ("(date 1)", "(date 2)")


def _fold(value, total_ball):
    value %= total_ball
    return value if value else total_ball


def date_seed(today, config):
    """
    Two lists of six seed balls for `today`.

    Returns
    -------
    (n, e) : tuple of lists of int, values in [1, total_ball]
    """
    total = config.total_ball
    days = (today - config.date_reference).days
    num = abs(config.date_offset + math.ceil(days * config.date_multiplier))

    snum = str(num)
    digits = snum.zfill(8) if len(snum) < 8 else snum[:8]
    rotated = digits[7] + digits[:7]

    s1, s2, s3, s4 = (int(digits[i:i + 2]) for i in range(0, 8, 2))
    s5, s6, s7, s8 = (int(rotated[i:i + 2]) for i in range(0, 8, 2))

    n = [
        _fold(s2 + s5, total),
        _fold(s1 + s6, total),
        _fold(s3 + s6, total),
        _fold(s2 + s7, total),
        _fold(s4 + s7, total),
        _fold(s3 + s8, total),
    ]

    joined = "".join(f"{x:02d}" for x in n)
    e = [_fold(int(joined[11] + joined[0]), total)]
    for start in range(1, 11, 2):
        e.append(_fold(int(joined[start:start + 2]), total))
    return n, e


def _seeded_draw(seeds, globe, config, rng, label):
    drawn = []
    for ball in seeds[:config.draw_ball]:
        if ball in drawn:
            ball = gauss_pick(globe, config, rng, exclude=drawn)
        drawn.append(ball)
    while len(drawn) < config.draw_ball:
        drawn.append(gauss_pick(globe, config, rng, exclude=drawn))
    return Draw(sorted(drawn), label=label)


def draw_by_date(stats, config, rng, today=None, seed_fn=date_seed):
    """
    The two date-seeded draws for `today` (defaults to the current date).

    Returns
    -------
    list of two Draws, each sorted ascending
    """
    today = today or date.today()
    globe = random_globe(stats, rng)
    seeds = seed_fn(today, config)
    return [_seeded_draw(list(s), globe, config, rng, label)
            for s, label in zip(seeds, LABELS)]
