"""
Lotto draw statistics and coupon generation.

Frequency and co-occurrence statistics over a draw history, and a coupon
generator mixing frequency-arranged Galton draws, date-seeded draws and
lucky-number draws.
"""

from lotto.config import SAYISAL_LOTTO, SUPER_LOTTO, GameConfig, make_rng
from lotto.coupon import RelaxedDrawWarning, generate_coupon
from lotto.engine import LottoEngine
from lotto.galton import InvalidDomain
from lotto.history import Coupon, Draw, DrawHistory, load_history

__all__ = [
    "GameConfig",
    "SUPER_LOTTO",
    "SAYISAL_LOTTO",
    "make_rng",
    "Draw",
    "DrawHistory",
    "Coupon",
    "load_history",
    "InvalidDomain",
    "RelaxedDrawWarning",
    "generate_coupon",
    "LottoEngine",
]
