"""
Combination Matcher

Decides whether a candidate draw shares a k-element subset with any draw
of a reference collection (the history or the coupon built so far), and
in collector mode lists / counts the shared subsets against one draw.

Draws are bitmasks over ball values, so subset containment is
(subset_mask & draw_mask) == subset_mask.
"""
from itertools import combinations

from scipy.special import comb

from lotto.history import Draw, DrawHistory, draw_mask


def _numbers(draw):
    return draw.numbers if isinstance(draw, Draw) else tuple(draw)


def _mask(draw):
    return draw.mask if isinstance(draw, Draw) else draw_mask(draw)


def popcount(mask):
    return bin(mask).count("1")


def subset_count(draw_ball, k):
    """C(draw_ball, k), the number of k-subsets of one draw."""
    return int(comb(draw_ball, k, exact=True))


def iter_subsets(numbers, k):
    """k-subsets of `numbers` in lexicographic index order, with their masks."""
    for subset in combinations(numbers, k):
        yield subset, draw_mask(subset)


def format_subset(subset):
    return "(" + ",".join(f"{n:2d}" for n in subset) + ")"


def has_match(candidate, k, reference):
    """
    True if some k-subset of `candidate` is contained in a reference draw.

    A k-subset of the candidate fits inside draw D exactly when the two
    share at least k balls, so each reference draw costs one AND plus a
    popcount (or one row of the history indicator product).
    An empty reference never matches.
    """
    numbers = _numbers(candidate)
    if k <= 0 or k > len(numbers) or not reference:
        return False

    if isinstance(reference, DrawHistory):
        return bool((reference.overlaps(numbers) >= k).any())

    cmask = _mask(candidate)
    for other in reference:
        if popcount(cmask & _mask(other)) >= k:
            return True
    return False


def match_subsets(candidate, k, reference_draw, table=None):
    """
    Collector mode: every k-subset of `candidate` contained in `reference_draw`.

    Parameters
    ----------
    candidate : Draw or sequence of int
    k : int
    reference_draw : Draw or sequence of int
    table : dict, optional
        Co-occurrence table; each matching subset is inserted with count 1
        or incremented.

    Returns
    -------
    list of matching subsets (tuples, in candidate order)
    """
    numbers = _numbers(candidate)
    ref_mask = _mask(reference_draw)
    found = []
    if k <= 0 or k > len(numbers):
        return found
    # Fewer than k shared balls: no subset can be contained
    if popcount(_mask(candidate) & ref_mask) < k:
        return found

    for subset, smask in iter_subsets(numbers, k):
        if smask & ref_mask == smask:
            found.append(subset)
            if table is not None:
                key = tuple(sorted(subset))
                table[key] = table.get(key, 0) + 1
    return found


def match_description(candidate, k, reference_draw):
    """Human-readable "( a, b), ( c, d)" list of shared k-subsets."""
    return ", ".join(format_subset(s) for s in match_subsets(candidate, k, reference_draw))
