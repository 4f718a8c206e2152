from datetime import date

import numpy as np
import pandas as pd
import pytest

from lotto.config import SAYISAL_LOTTO, SUPER_LOTTO, GameConfig, make_rng
from lotto.history import Coupon, Draw, DrawHistory, draw_mask, load_history


class TestDraw:
    def test_duplicates_rejected(self):
        with pytest.raises(ValueError):
            Draw([1, 1, 2, 3, 4, 5])

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            Draw([0, 1, 2, 3, 4, 5], total_ball=60)
        with pytest.raises(ValueError):
            Draw([1, 2, 3, 4, 5, 61], total_ball=60)

    def test_value_semantics(self):
        a = Draw([1, 2, 3, 4, 5, 6], label="(x)")
        b = Draw([1, 2, 3, 4, 5, 6])
        assert a == b
        assert hash(a) == hash(b)
        assert 3 in a
        assert a.mask == draw_mask([6, 5, 4, 3, 2, 1])

    def test_repr(self):
        assert "relaxed" in repr(Draw([1, 2], relaxed=True))


class TestDrawHistory:
    def test_supplementary_must_parallel(self):
        with pytest.raises(ValueError):
            DrawHistory([[1, 2, 3, 4, 5, 6]], supplementary=[1, 2])

    def test_from_dataframe_sorts_by_date(self, history_df):
        h = DrawHistory.from_dataframe(history_df)
        assert [d.date for d in h] == [date(2020, 1, 1), date(2020, 1, 8), date(2020, 1, 15)]
        assert h.supplementary == (21, 20, None)

    def test_to_dataframe(self, history_df):
        df = DrawHistory.from_dataframe(history_df).to_dataframe()
        assert list(df.columns) == ["date", "num1", "num2", "num3", "num4", "num5", "num6",
                                    "additional_number"]
        assert df["num1"].tolist() == [1, 1, 3]

    def test_overlaps(self, scenario_history):
        assert scenario_history.overlaps([1, 2, 3, 11, 12, 13]).tolist() == [3, 2]
        assert scenario_history.overlaps([70]).tolist() == [0, 0]

    def test_overlap_matrix(self, scenario_history):
        assert np.array_equal(scenario_history.overlap_matrix(), [[6, 2], [2, 6]])

    def test_load_history(self, tmp_path, history_df):
        path = tmp_path / "history.csv"
        history_df.to_csv(path, index=False)
        h = load_history(str(path))
        assert len(h) == 3
        assert h[0].numbers == (1, 2, 3, 4, 5, 6)

    def test_load_history_without_dates(self, tmp_path):
        path = tmp_path / "undated.csv"
        pd.DataFrame({f"num{i}": [i, i + 10] for i in range(1, 7)}).to_csv(path, index=False)
        h = load_history(str(path))
        assert len(h) == 2
        assert h[1].numbers == (11, 12, 13, 14, 15, 16)
        assert h[0].date is None

    def test_load_history_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_history(str(tmp_path / "missing.csv"))


def test_coupon_dataframe():
    coupon = Coupon()
    coupon.append(Draw([1, 2, 3, 4, 5, 6], label="(blend 1)"))
    coupon.append(Draw([7, 8, 9, 10, 11, 12], label="(random)", relaxed=True))
    df = coupon.to_dataframe()
    assert df["slot"].tolist() == [1, 2]
    assert df["relaxed"].tolist() == [False, True]
    assert coupon.relaxed_count == 1
    assert "additional_number" not in df.columns


class TestGameConfig:
    @pytest.mark.parametrize("kwargs", [
        {"draw_ball": 0},
        {"total_ball": 5},
        {"total_ball_ss": -1},
        {"gauss_left_jitter": 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_lucky_floor(self):
        assert SUPER_LOTTO.lucky_floor == 4
        assert SAYISAL_LOTTO.lucky_floor == 3
        assert GameConfig(total_ball=49).lucky_floor == 5

    def test_supplementary_config(self):
        ss = SAYISAL_LOTTO.supplementary_config()
        assert (ss.total_ball, ss.draw_ball, ss.total_ball_ss) == (90, 1, 0)
        with pytest.raises(ValueError):
            SUPER_LOTTO.supplementary_config()

    def test_make_rng(self):
        state = np.random.RandomState(1)
        assert make_rng(state) is state
        assert make_rng(5).randint(0, 1000) == np.random.RandomState(5).randint(0, 1000)


def test_dataframe_without_dates():
    df = pd.DataFrame({f"num{i}": [i] for i in range(1, 7)})
    h = DrawHistory.from_dataframe(df)
    assert h[0].date is None
    assert h.supplementary == ()
