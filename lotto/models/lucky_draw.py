"""
Lucky-Number Draw Builder

Seeds a draw from historically co-occurring subsets and fills it with a
random walk over strong pairs: from the last ball, jump to a partner it
has often been drawn with, until a ball not yet in the draw is reached.

Slot 0 takes a whole top-10 triple, slot 1 two balls of one, later
slots a random strong pair.
"""
from lotto.config import LUCKY_TOP_ROWS
from lotto.globe import norm_globe
from lotto.history import Draw
from lotto.models.gauss_draw import gauss_pick

SLOT_LABELS = ("(lucky 3)", "(2 of lucky 3)")
PAIR_LABEL = "(lucky 2)"
FALLBACK_LABEL = "(normal distribution)"


class LuckyTables:
    """
    Mined 2- and 3-subset tables prepared for drawing.

    Parameters
    ----------
    pairs : dict {(a, b): count} in discovery order
    triples : dict {(a, b, c): count} in discovery order
    floor : int
        Minimum pair count for a pair to be "strong".
    """

    def __init__(self, pairs, triples, floor):
        self.floor = floor
        self.pairs = list(pairs.items())
        self.triples_ranked = sorted(triples.items(), key=lambda x: x[1], reverse=True)

        self.strong_pairs = [p for p, c in self.pairs if c >= floor]
        self.partners = {}
        for a, b in self.strong_pairs:
            self.partners.setdefault(a, []).append(b)
            self.partners.setdefault(b, []).append(a)

    def seed_pairs(self):
        """Pairs eligible to seed a draw; all pairs when none is strong."""
        return self.strong_pairs or [p for p, _ in self.pairs]


def _seed(slot, tables, rng):
    """(seed balls, walk start, label) for a slot."""
    if slot < 2 and tables.triples_ranked:
        top = min(LUCKY_TOP_ROWS, len(tables.triples_ranked))
        triple = tables.triples_ranked[rng.randint(0, top)][0]
        ball1, ball2, ball3 = (triple[i] for i in rng.permutation(3))
        if slot == 0:
            return [ball1, ball2, ball3], ball2, SLOT_LABELS[0]
        # the omitted ball starts the walk
        return [ball1, ball3], ball2, SLOT_LABELS[1]

    candidates = tables.seed_pairs()
    if not candidates:
        return [], None, FALLBACK_LABEL
    pair = candidates[rng.randint(0, len(candidates))]
    if rng.randint(0, 2):
        pair = (pair[1], pair[0])
    return [pair[0], pair[1]], pair[1], PAIR_LABEL


def _walk(start, drawn, tables, rng, max_steps):
    """First ball not in `drawn` reached by hopping over strong pairs, or None."""
    current = start
    for _ in range(max_steps):
        options = tables.partners.get(current)
        if not options:
            return None
        current = options[rng.randint(0, len(options))]
        if current not in drawn:
            return current
    return None


def build_lucky_draw(slot, tables, stats, config, rng):
    """
    One lucky-biased draw for coupon slot `slot` (0-based within the chunk).

    Walk dead ends and empty tables fall back to Galton picks from the
    normal-distribution globe.
    """
    drawn, current, label = _seed(slot, tables, rng)
    drawn = drawn[:config.draw_ball]
    globe = None
    max_steps = config.total_ball * 4

    while len(drawn) < config.draw_ball:
        ball = _walk(current, drawn, tables, rng, max_steps) if current is not None else None
        if ball is None:
            if globe is None:
                globe = norm_globe(stats)
            ball = gauss_pick(globe, config, rng, exclude=drawn)
        drawn.append(ball)
        current = ball

    return Draw(sorted(drawn), label=label)
