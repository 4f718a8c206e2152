"""
Lotto Engine - session context

Holds one history, one game configuration and one random stream, and
caches the statistics every draw and report needs. Two engines never
share state, so independent sessions (or tests) can run side by side.
"""
from datetime import date

from lotto.analysis import (
    ball_stats,
    comb_match_report,
    frequency_analysis,
    match_comb_counts,
)
from lotto.config import SUPER_LOTTO, make_rng
from lotto.coupon import generate_coupon, load_lucky_tables, plan_chunks
from lotto.galton import distribution_check
from lotto.history import DrawHistory
from lotto.lucky import lucky_report, mine_lucky
from lotto.models import draw_by_strategy
from lotto.models.date_seeded import draw_by_date
from lotto.models.lucky_draw import LuckyTables


class LottoEngine:
    """
    Statistics and draw generation over a fixed history.

    Parameters
    ----------
    history : DrawHistory or pd.DataFrame
        DataFrames are converted with DrawHistory.from_dataframe.
    config : GameConfig
    seed : int or np.random.RandomState, optional
    """

    def __init__(self, history, config=SUPER_LOTTO, seed=None):
        if not isinstance(history, DrawHistory):
            history = DrawHistory.from_dataframe(history)
        self.history = history
        self.config = config
        self.rng = make_rng(seed)

        self._stats = None
        self._frequency = None
        self._match_counts = None
        self._lucky = {}
        self._lucky_tables = None

    # -- statistics ---------------------------------------------------

    @property
    def stats(self):
        """Ball appearance counts, computed once per engine."""
        if self._stats is None:
            self._stats = ball_stats(self.history, self.config.total_ball)
        return self._stats

    def frequency(self):
        if self._frequency is None:
            self._frequency = frequency_analysis(self.history, self.config)
        return self._frequency

    def match_counts(self, verbose=False):
        """Pairs of past draws sharing a k-subset, for k = 2..6."""
        if self._match_counts is None:
            self._match_counts = match_comb_counts(self.history, verbose=verbose)
        return self._match_counts

    def comb_match(self, k):
        return comb_match_report(self.history, k)

    def lucky(self, k):
        """Co-occurrence table for k-subsets (cached per k)."""
        if k not in self._lucky:
            self._lucky[k] = mine_lucky(self.history, k)
        return self._lucky[k]

    def lucky_report(self, k, top=None):
        return lucky_report(self.history, k, top=top)

    def lucky_tables(self, verbose=False):
        if self._lucky_tables is None:
            if 2 in self._lucky and 3 in self._lucky:
                self._lucky_tables = LuckyTables(self._lucky[2], self._lucky[3],
                                                 self.config.lucky_floor)
            else:
                self._lucky_tables = load_lucky_tables(self.history, self.config,
                                                       verbose=verbose)
        return self._lucky_tables

    def distribution_check(self, trials=10000, ball_count=None):
        """Empirical vs binomial distribution of the Galton sampler."""
        return distribution_check(ball_count or self.config.total_ball, trials, self.rng,
                                  self.config.gauss_left_base,
                                  self.config.gauss_left_jitter)

    # -- generation ---------------------------------------------------

    def draw(self, strategy, match_comb=0, elim_comb=0, verbose=False):
        """One draw from the named strategy under the given history rules."""
        return draw_by_strategy(strategy, self.stats, self.history, self.config, self.rng,
                                match_comb, elim_comb, verbose=verbose)

    def date_draws(self, today=None):
        return draw_by_date(self.stats, self.config, self.rng, today=today)

    def generate(self, count, today=None, verbose=False):
        """
        Full coupon of `count` draws.

        Lucky tables are mined on the first call that needs them and reused
        afterwards.
        """
        today = today or date.today()
        needs_lucky = any(c["mode"] == "lucky" for c in plan_chunks(count))
        tables = self.lucky_tables(verbose=verbose) if needs_lucky else None
        return generate_coupon(self.history, count, self.config, rng=self.rng,
                               today=today, tables=tables, verbose=verbose)

    def summary(self):
        """Short report dict in the shape the demo script prints."""
        freq = self.frequency()
        return {
            "game": self.config.name,
            "total_draws": len(self.history),
            "hot": [n for n, _ in freq["ranked"][:6]],
            "cold": [n for n, _ in freq["ranked"][-6:]],
            "match_counts": self.match_counts(),
        }
