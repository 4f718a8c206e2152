"""
Lotto Draw Strategies

Available strategies:
- norm: most-frequent balls at the centre of a Galton-sampled globe
- blend1 / blend2: hot and cold balls blended around the centre
- left: globe stacked by ascending frequency
- side: most-frequent balls pushed to the globe edges
- random: churned globe, middle ball taken directly
- date_seeded: two numerology draws derived from today's date
- lucky_draw: draws seeded and filled from co-occurring subsets
"""

from . import gauss_draw
from . import random_shuffle
from . import date_seeded
from . import lucky_draw

from .gauss_draw import draw_by_gauss
from .random_shuffle import draw_by_rand

STRATEGY_NAMES = ("norm", "blend1", "blend2", "left", "side", "random")


def draw_by_strategy(name, stats, history, config, rng, match_comb=0, elim_comb=0,
                     verbose=False):
    """Produce one draw with the named strategy under the given history rules."""
    if name == "random":
        return draw_by_rand(stats, history, config, rng, match_comb, elim_comb,
                            verbose=verbose)
    if name not in STRATEGY_NAMES:
        raise ValueError(f"Unknown strategy {name!r}; expected one of {STRATEGY_NAMES}")
    return draw_by_gauss(name, stats, history, config, rng, match_comb, elim_comb,
                         verbose=verbose)


__all__ = [
    "gauss_draw",
    "random_shuffle",
    "date_seeded",
    "lucky_draw",
    "draw_by_strategy",
    "STRATEGY_NAMES",
]
