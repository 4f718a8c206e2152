"""
Lotto History - Statistical Analysis

Frequency statistics over the draw history and the "matched
combinations" statistics mode: how many pairs of past draws share a
k-subset, and which subsets they share.
"""

import numpy as np
import pandas as pd

from lotto.combinations import match_description, subset_count


# ===================================================================
# 1. Frequency Analysis
# ===================================================================

def ball_stats(history, total_ball):
    """
    Appearance count of every ball in [1, total_ball] across the history.

    Balls outside the domain are ignored. Pure function of its inputs.
    """
    counts = {n: 0 for n in range(1, total_ball + 1)}
    for draw in history:
        for n in draw:
            if n in counts:
                counts[n] += 1
    return counts


def supplementary_stats(history, total_ball_ss):
    """Appearance count of every supplementary ball; {} when the game has none."""
    counts = {n: 0 for n in range(1, total_ball_ss + 1)}
    for n in history.supplementary:
        if n is not None and n in counts:
            counts[n] += 1
    return counts


def frequency_analysis(history, config) -> dict:
    """
    Count each ball as a main number and as the supplementary number,
    and rank the main domain.

    Returns
    -------
    dict with keys:
        main_counts       : dict {number: count}
        additional_counts : dict {number: count}
        overall_freq_pct  : dict {number: pct of all main slots}
        ranked            : list of (number, main_count) sorted desc
        total_draws       : int
        dataframe         : pd.DataFrame summary
    """
    total_draws = len(history)
    main_counts = ball_stats(history, config.total_ball)
    additional_counts = supplementary_stats(history, config.total_ball_ss)

    total_slots = config.draw_ball * total_draws if total_draws > 0 else 1
    overall_freq_pct = {n: round(100.0 * c / total_slots, 4)
                        for n, c in main_counts.items()}

    ranked = sorted(main_counts.items(), key=lambda x: (-x[1], x[0]))

    records = []
    for rank, (num, cnt) in enumerate(ranked, 1):
        records.append({
            "number": num,
            "main_count": cnt,
            "additional_count": additional_counts.get(num, 0),
            "main_freq_pct": overall_freq_pct[num],
            "rank": rank,
        })

    return {
        "main_counts": main_counts,
        "additional_counts": additional_counts,
        "overall_freq_pct": overall_freq_pct,
        "ranked": ranked,
        "total_draws": total_draws,
        "dataframe": pd.DataFrame(records),
    }


# ===================================================================
# 2. Matched Combinations
# ===================================================================

def overlapping_pairs(overlaps, k):
    """(i, j) with i < j whose draws share at least k balls, row-major."""
    if overlaps.size == 0:
        return []
    mask = np.triu(overlaps >= k, 1)
    return [tuple(int(x) for x in p) for p in np.argwhere(mask)]


def match_comb_counts(history, ks=(2, 3, 4, 5, 6), verbose=False) -> dict:
    """
    For each k, the number of history pairs (i < j) sharing at least one
    k-subset.
    """
    overlaps = history.overlap_matrix()
    counts = {}
    for k in ks:
        if overlaps.size == 0:
            counts[k] = 0
        else:
            counts[k] = int(np.triu(overlaps >= k, 1).sum())
        if verbose:
            print(f"  [Stats] {counts[k]:,} draw pairs share a {k}-subset")
    return counts


def comb_match_report(history, k) -> dict:
    """
    Every pair of past draws sharing a k-subset, with the shared subsets.

    Returns
    -------
    dict with keys:
        k          : int
        count      : int, number of matching pairs
        subsets_per_draw : int, C(draw size, k)
        pairs      : list of dicts {first_date, first, second_date, second,
                     days, subsets}
        dataframe  : pd.DataFrame of pairs
    """
    if not 1 <= k <= 6:
        raise ValueError(f"k must be in 1..6, got {k}")

    pairs = []
    for i, j in overlapping_pairs(history.overlap_matrix(), k):
        first, second = history[i], history[j]
        days = None
        if first.date is not None and second.date is not None:
            days = abs((second.date - first.date).days)
        pairs.append({
            "first_date": first.date,
            "first": first.numbers,
            "second_date": second.date,
            "second": second.numbers,
            "days": days,
            "subsets": match_description(first, k, second),
        })

    draw_ball = len(history[0]) if len(history) else 6
    return {
        "k": k,
        "count": len(pairs),
        "subsets_per_draw": subset_count(draw_ball, k),
        "pairs": pairs,
        "dataframe": pd.DataFrame(pairs, columns=["first_date", "first", "second_date",
                                                  "second", "days", "subsets"]),
    }
