from datetime import date, timedelta

import numpy as np
import pandas as pd
import pytest

from lotto.config import GameConfig
from lotto.history import Draw, DrawHistory


def make_history(n_draws, total_ball, seed, total_ball_ss=0):
    rng = np.random.RandomState(seed)
    start = date(2020, 1, 1)
    draws = []
    supplementary = []
    for i in range(n_draws):
        nums = rng.choice(total_ball, 6, replace=False) + 1
        draws.append(Draw(sorted(nums), date=start + timedelta(days=7 * i)))
        if total_ball_ss:
            supplementary.append(int(rng.randint(1, total_ball_ss + 1)))
    return DrawHistory(draws, supplementary or None)


@pytest.fixture
def rng():
    return np.random.RandomState(42)


@pytest.fixture
def scenario_history():
    return DrawHistory([
        Draw([1, 2, 3, 4, 5, 6], date=date(2020, 1, 1)),
        Draw([1, 2, 7, 8, 9, 10], date=date(2020, 1, 8)),
    ])


@pytest.fixture
def history():
    """80 draws over 1..60."""
    return make_history(80, 60, seed=7)


@pytest.fixture
def small_config():
    return GameConfig(total_ball=30, churn_scale=0.01, name="test 6/30")


@pytest.fixture
def small_history():
    """40 draws over 1..30."""
    return make_history(40, 30, seed=11)


@pytest.fixture
def ss_config():
    return GameConfig(total_ball=30, total_ball_ss=10, churn_scale=0.01, name="test 6/30+10")


@pytest.fixture
def ss_history():
    return make_history(40, 30, seed=5, total_ball_ss=10)


@pytest.fixture
def history_df():
    return pd.DataFrame({
        "date": ["2020-01-08", "2020-01-01", "2020-01-15"],
        "num1": [1, 1, 3], "num2": [2, 2, 4], "num3": [7, 3, 5],
        "num4": [8, 4, 6], "num5": [9, 5, 11], "num6": [10, 6, 12],
        "additional_number": [20, 21, None],
    })
