"""
Co-occurrence Miner ("numbers that love each other")

For every pair of past draws, every 2-, 3- or 4-subset the two share is
counted. Subsets with a high count are the "lucky numbers" that seed the
lucky-biased coupon mode.
"""
import pandas as pd

from lotto.analysis import overlapping_pairs
from lotto.combinations import format_subset, match_subsets

LUCKY_SIZES = (2, 3, 4)


def mine_lucky(history, k, verbose=False):
    """
    Build the co-occurrence table for subsets of size k.

    Pairs are visited (i asc, j asc) and subsets in lexicographic order of
    the earlier draw, so the table's insertion order is the discovery order.

    Returns
    -------
    dict {subset tuple: number of draw pairs sharing it}
    """
    if k not in LUCKY_SIZES:
        raise ValueError(f"Lucky subsets must have size {LUCKY_SIZES}, got {k}")

    table = {}
    if len(history) < 2:
        return table

    # Pairs sharing fewer than k balls cannot contribute
    pairs = overlapping_pairs(history.overlap_matrix(), k)
    if verbose:
        print(f"  [Lucky] {len(pairs):,} draw pairs share {k}+ balls")
    for i, j in pairs:
        match_subsets(history[i], k, history[j], table)

    if verbose:
        print(f"  [Lucky] {len(table):,} distinct {k}-subsets")
    return table


def rank_lucky(table):
    """Subsets by count descending; ties keep discovery order."""
    return sorted(table.items(), key=lambda x: x[1], reverse=True)


def draws_together(pair_count):
    """
    Number of draws that contained a subset shared by `pair_count` draw pairs.

    m draws sharing a subset give m(m-1)/2 pairs; this inverts that.
    """
    n = 0
    remaining = pair_count
    while remaining > 0:
        remaining -= n + 1
        n += 1
    return n + 1


def lucky_report(history, k, top=None) -> dict:
    """
    Ranked co-occurrence table as a report.

    Returns
    -------
    dict with:
        ranked    : list of (subset, pair_count)
        dataframe : pd.DataFrame with subset, label, pair_count, draws_together
    """
    ranked = rank_lucky(mine_lucky(history, k))
    if top is not None:
        ranked = ranked[:top]
    records = [{
        "subset": subset,
        "label": format_subset(subset),
        "pair_count": count,
        "draws_together": draws_together(count),
    } for subset, count in ranked]
    return {
        "k": k,
        "ranked": ranked,
        "dataframe": pd.DataFrame(records, columns=["subset", "label", "pair_count",
                                                    "draws_together"]),
    }
