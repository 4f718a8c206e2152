"""
Draw History Containers

Draw, DrawHistory and Coupon value types plus the pandas adapters that
materialize a history from the CSV schema:
    date, num1-num6, additional_number (optional)
"""
import os

import numpy as np
import pandas as pd

NUM_COLS = [f"num{i}" for i in range(1, 7)]
ADDITIONAL_COL = "additional_number"


def draw_mask(numbers):
    """Bitmask with bit n set for every ball n."""
    mask = 0
    for n in numbers:
        mask |= 1 << int(n)
    return mask


class Draw:
    """One set of distinct balls, optionally dated and labelled."""

    def __init__(self, numbers, date=None, label=None, total_ball=None, relaxed=False):
        numbers = tuple(int(n) for n in numbers)
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"Duplicate balls in draw {numbers}")
        if total_ball is not None:
            bad = [n for n in numbers if not 1 <= n <= total_ball]
            if bad:
                raise ValueError(f"Balls {bad} outside [1, {total_ball}]")
        self.numbers = numbers
        self.date = date
        self.label = label
        self.relaxed = relaxed
        self.mask = draw_mask(numbers)

    def __len__(self):
        return len(self.numbers)

    def __iter__(self):
        return iter(self.numbers)

    def __getitem__(self, idx):
        return self.numbers[idx]

    def __contains__(self, ball):
        return ball in self.numbers

    def __eq__(self, other):
        if isinstance(other, Draw):
            return self.numbers == other.numbers
        return NotImplemented

    def __hash__(self):
        return hash(self.numbers)

    def __repr__(self):
        parts = [f"{list(self.numbers)}"]
        if self.date is not None:
            parts.append(f"date={self.date}")
        if self.label:
            parts.append(f"label={self.label!r}")
        if self.relaxed:
            parts.append("relaxed")
        return f"Draw({', '.join(parts)})"


def _as_draw(item):
    return item if isinstance(item, Draw) else Draw(item)


class DrawHistory:
    """
    Chronological sequence of past draws, read-only for a session.

    A parallel list of supplementary balls may be given (one per draw,
    None where a draw had none).
    """

    def __init__(self, draws=(), supplementary=None):
        self._draws = tuple(_as_draw(d) for d in draws)
        if supplementary is None:
            supplementary = ()
        self._supplementary = tuple(supplementary)
        if self._supplementary and len(self._supplementary) != len(self._draws):
            raise ValueError("supplementary history must parallel the main history")
        self._masks = tuple(d.mask for d in self._draws)
        self._indicator = None

    @property
    def draws(self):
        return self._draws

    @property
    def supplementary(self):
        return self._supplementary

    @property
    def masks(self):
        return self._masks

    def indicator(self):
        """0/1 matrix (draws x max_ball+1), 1 where a draw holds the ball."""
        if self._indicator is None:
            width = max((max(d.numbers) for d in self._draws), default=0) + 1
            matrix = np.zeros((len(self._draws), width), dtype=np.int16)
            for row, draw in enumerate(self._draws):
                matrix[row, list(draw.numbers)] = 1
            self._indicator = matrix
        return self._indicator

    def overlaps(self, numbers):
        """Number of balls every historical draw shares with `numbers`."""
        matrix = self.indicator()
        cols = [n for n in numbers if 0 <= n < matrix.shape[1]]
        if not cols:
            return np.zeros(len(self._draws), dtype=np.int16)
        return matrix[:, cols].sum(axis=1)

    def overlap_matrix(self):
        """Pairwise shared-ball counts between all historical draws."""
        matrix = self.indicator().astype(np.int32)
        return matrix @ matrix.T

    def __len__(self):
        return len(self._draws)

    def __iter__(self):
        return iter(self._draws)

    def __getitem__(self, idx):
        return self._draws[idx]

    def __bool__(self):
        return bool(self._draws)

    def __repr__(self):
        return f"DrawHistory({len(self._draws)} draws)"

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "DrawHistory":
        """Build a history from the num1-num6 / additional_number schema."""
        if "date" in df.columns:
            df = df.copy()
            if not pd.api.types.is_datetime64_any_dtype(df["date"]):
                df["date"] = pd.to_datetime(df["date"])
            df = df.sort_values("date", kind="stable").reset_index(drop=True)

        draws = []
        for _, row in df.iterrows():
            nums = [int(row[c]) for c in NUM_COLS]
            draw_date = row["date"].date() if "date" in df.columns else None
            draws.append(Draw(nums, date=draw_date))

        supplementary = None
        if ADDITIONAL_COL in df.columns:
            supplementary = [None if pd.isna(v) else int(v) for v in df[ADDITIONAL_COL]]
        return cls(draws, supplementary)

    def to_dataframe(self) -> pd.DataFrame:
        records = []
        for i, draw in enumerate(self._draws):
            rec = {"date": draw.date}
            for col, n in zip(NUM_COLS, draw.numbers):
                rec[col] = n
            if self._supplementary:
                rec[ADDITIONAL_COL] = self._supplementary[i]
            records.append(rec)
        return pd.DataFrame(records)


def load_history(csv_path) -> DrawHistory:
    """Load a history CSV written in the num1-num6 schema."""
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"History file not found: {csv_path}")
    df = pd.read_csv(csv_path)
    return DrawHistory.from_dataframe(df)


class Coupon:
    """Generated draws in the order they were accepted."""

    def __init__(self):
        self.draws = []
        self.supplementary = []

    def append(self, draw):
        self.draws.append(draw)

    def __len__(self):
        return len(self.draws)

    def __iter__(self):
        return iter(self.draws)

    def __getitem__(self, idx):
        return self.draws[idx]

    @property
    def relaxed_count(self):
        return sum(1 for d in self.draws if d.relaxed)

    def to_dataframe(self) -> pd.DataFrame:
        records = []
        for i, draw in enumerate(self.draws):
            rec = {"slot": i + 1}
            for col, n in zip(NUM_COLS, draw.numbers):
                rec[col] = n
            if self.supplementary:
                rec[ADDITIONAL_COL] = self.supplementary[i] if i < len(self.supplementary) else None
            rec["label"] = draw.label
            rec["relaxed"] = draw.relaxed
            records.append(rec)
        return pd.DataFrame(records)

    def __repr__(self):
        return f"Coupon({len(self.draws)} draws)"
