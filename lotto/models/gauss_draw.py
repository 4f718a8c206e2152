"""
Gaussian Extraction Strategies

Balls are taken from a frequency-arranged globe at positions chosen by
the Galton sampler, so the balls the arrangement puts in the middle are
drawn most often. A draw is retried until it passes the history rules;
after `total_ball` attempts the last draw is returned as best effort.
"""
from lotto.galton import gauss_index
from lotto.filters import history_passes
from lotto.globe import arrange_globe
from lotto.history import Draw

LABELS = {
    "norm": "(normal distribution)",
    "blend1": "(blend 1)",
    "blend2": "(blend 2)",
    "left": "(left stacked)",
    "side": "(side stacked)",
    "random": "(random)",
}


def gauss_pick(globe, config, rng, exclude=()):
    """One ball from the globe at a Galton index, redrawn while in `exclude`."""
    while True:
        idx = gauss_index(len(globe), rng, config.gauss_left_base, config.gauss_left_jitter)
        ball = globe[idx - 1]
        if ball not in exclude:
            return ball


def pick_distinct(globe, draw_ball, config, rng):
    drawn = []
    for _ in range(draw_ball):
        drawn.append(gauss_pick(globe, config, rng, exclude=drawn))
    return drawn


def draw_from_globe(globe, history, config, rng, match_comb=0, elim_comb=0,
                    label=None, verbose=False):
    """
    Draw `config.draw_ball` distinct balls from a prepared globe.

    Parameters
    ----------
    globe : list of int
    history : DrawHistory
    match_comb, elim_comb : int
        History rules, 0 disables (see lotto.filters).

    Returns
    -------
    Draw sorted ascending; `relaxed` is set when no attempt passed.
    """
    numbers = []
    for _ in range(config.total_ball):
        numbers = pick_distinct(globe, config.draw_ball, config, rng)
        if history_passes(numbers, history, match_comb, elim_comb):
            return Draw(sorted(numbers), label=label)

    if verbose:
        print(f"  [Draw] {label}: no attempt passed match={match_comb} "
              f"elim={elim_comb}, keeping best effort")
    return Draw(sorted(numbers), label=label, relaxed=True)


def draw_by_gauss(strategy, stats, history, config, rng, match_comb=0, elim_comb=0,
                  verbose=False):
    """Arrange the `strategy` globe and draw from it."""
    globe = arrange_globe(strategy, stats, rng)
    return draw_from_globe(globe, history, config, rng, match_comb, elim_comb,
                           label=LABELS[strategy], verbose=verbose)
