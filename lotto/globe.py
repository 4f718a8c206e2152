"""
Globe Arranger

A globe is a permutation of every ball. The Galton sampler favours the
middle of the globe, so each arrangement decides which frequency ranks
sit near the centre:

    blend1  least- and most-frequent meet at the centre, mid ranks at the edges
    blend2  least, most, 2nd least, 2nd most, ... interleaved front to back
    left    ascending frequency, least-frequent first
    side    most-frequent at both edges, least-frequent at the centre
    norm    most-frequent at the centre, least-frequent at the edges
    random  blend1 or blend2 picked at random (churned later, per extraction)
"""

STRATEGIES = ("norm", "blend1", "blend2", "left", "side", "random")


def ranked_balls(stats, descending=False):
    """Balls ordered by count; ties keep ascending ball order."""
    if descending:
        return [b for b, _ in sorted(stats.items(), key=lambda x: (-x[1], x[0]))]
    return [b for b, _ in sorted(stats.items(), key=lambda x: (x[1], x[0]))]


def _front_back(ranked, front_first):
    """Alternately prepend / append ranked balls, starting with prepend if front_first."""
    globe = []
    for k, ball in enumerate(ranked):
        if (k % 2 == 0) == front_first:
            globe.insert(0, ball)
        else:
            globe.append(ball)
    return globe


def blend1_globe(stats):
    ranked = ranked_balls(stats)
    globe = []
    lo, hi = 0, len(ranked) - 1
    for k in range(len(ranked)):
        if k % 2:
            globe.append(ranked[hi])
            hi -= 1
        else:
            globe.insert(0, ranked[lo])
            lo += 1
    return globe


def blend2_globe(stats):
    ranked = ranked_balls(stats)
    globe = []
    lo, hi = 0, len(ranked) - 1
    while lo <= hi:
        globe.append(ranked[lo])
        if lo != hi:
            globe.append(ranked[hi])
        lo += 1
        hi -= 1
    return globe


def left_globe(stats):
    return ranked_balls(stats)


def side_globe(stats):
    return _front_back(ranked_balls(stats), front_first=False)


def norm_globe(stats):
    return _front_back(ranked_balls(stats, descending=True), front_first=False)


def random_globe(stats, rng):
    if rng.randint(0, 2):
        return blend1_globe(stats)
    return blend2_globe(stats)


_ARRANGERS = {
    "norm": norm_globe,
    "blend1": blend1_globe,
    "blend2": blend2_globe,
    "left": left_globe,
    "side": side_globe,
}


def arrange_globe(strategy, stats, rng=None):
    """Build the globe for `strategy` from ball stats {ball: count}."""
    if strategy == "random":
        if rng is None:
            raise ValueError("random globe needs an rng")
        return random_globe(stats, rng)
    try:
        arranger = _ARRANGERS[strategy]
    except KeyError:
        raise ValueError(f"Unknown globe strategy {strategy!r}; expected one of {STRATEGIES}")
    return arranger(stats)
