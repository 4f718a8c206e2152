"""
Game Configuration for Lotto Draw Generation

Ball domains and the tuning constants of the draw algorithms.
The constants below are empirical values with no statistical
derivation; they are kept configurable.
"""
from datetime import date

import numpy as np


# Galton board: "left" is taken with probability (49 + U{0,1}) / 100
GAUSS_LEFT_BASE = 49
GAUSS_LEFT_JITTER = 2

# Random-shuffle globe churn. 1.0 gives the full relocation count
# (N^3 * U{1..3} / (N // 3) per extracted ball), which is slow in Python.
CHURN_SCALE = 0.05

# Date-seeded numerology
DATE_REFERENCE = date(2021, 7, 12)
DATE_OFFSET = 4532632
DATE_MULTIPLIER = 106.5

# Lucky pairs must have been shared by more than ceil(180 / N) draw pairs
LUCKY_FLOOR_BASE = 180
LUCKY_TOP_ROWS = 10

DRAW_BALL = 6


class GameConfig:
    """
    Ball domains for one lotto game.

    Parameters
    ----------
    total_ball : int
        Size of the main ball domain [1, total_ball].
    total_ball_ss : int
        Size of the supplementary ("super star") domain, 0 if the game has none.
    draw_ball : int
        Balls per draw.
    """

    def __init__(self, total_ball=60, total_ball_ss=0, draw_ball=DRAW_BALL,
                 gauss_left_base=GAUSS_LEFT_BASE, gauss_left_jitter=GAUSS_LEFT_JITTER,
                 churn_scale=CHURN_SCALE, date_reference=DATE_REFERENCE,
                 date_offset=DATE_OFFSET, date_multiplier=DATE_MULTIPLIER,
                 name=None):
        if draw_ball < 1:
            raise ValueError(f"draw_ball must be positive, got {draw_ball}")
        if total_ball < draw_ball:
            raise ValueError(
                f"total_ball ({total_ball}) must be at least draw_ball ({draw_ball})"
            )
        if total_ball_ss < 0:
            raise ValueError(f"total_ball_ss must be >= 0, got {total_ball_ss}")
        if gauss_left_jitter < 1:
            raise ValueError("gauss_left_jitter must be at least 1")

        self.total_ball = total_ball
        self.total_ball_ss = total_ball_ss
        self.draw_ball = draw_ball
        self.gauss_left_base = gauss_left_base
        self.gauss_left_jitter = gauss_left_jitter
        self.churn_scale = churn_scale
        self.date_reference = date_reference
        self.date_offset = date_offset
        self.date_multiplier = date_multiplier
        self.name = name or f"{draw_ball}/{total_ball}"

    @property
    def has_supplementary(self):
        return self.total_ball_ss > 0

    @property
    def lucky_floor(self):
        """Minimum co-occurrence count for a pair to feed lucky-mode walks."""
        return -(-LUCKY_FLOOR_BASE // self.total_ball) + 1

    def supplementary_config(self):
        """Single-ball game over the supplementary domain, same tuning constants."""
        if not self.has_supplementary:
            raise ValueError(f"{self.name} has no supplementary ball")
        return GameConfig(total_ball=self.total_ball_ss, total_ball_ss=0, draw_ball=1,
                          gauss_left_base=self.gauss_left_base,
                          gauss_left_jitter=self.gauss_left_jitter,
                          churn_scale=self.churn_scale,
                          date_reference=self.date_reference,
                          date_offset=self.date_offset,
                          date_multiplier=self.date_multiplier,
                          name=f"{self.name} supplementary")

    def __repr__(self):
        return (f"GameConfig(name={self.name!r}, total_ball={self.total_ball}, "
                f"total_ball_ss={self.total_ball_ss}, draw_ball={self.draw_ball})")


SUPER_LOTTO = GameConfig(total_ball=60, total_ball_ss=0, name="Super Lotto")
SAYISAL_LOTTO = GameConfig(total_ball=90, total_ball_ss=90, name="Sayisal Lotto")


def make_rng(seed=None):
    """Return a RandomState; an existing RandomState is passed through."""
    if isinstance(seed, np.random.RandomState):
        return seed
    return np.random.RandomState(seed)
