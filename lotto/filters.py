"""
Acceptance Filters for Generated Draws

History rules decide whether a candidate may leave a strategy; coupon
rules decide whether the assembler keeps it. Every filter returns
{"name", "passed", "detail"}.

The escalation ladder relaxes the rules over the 40 attempts the
assembler gives each strategy.
"""
from lotto.combinations import has_match


ESCALATION_ATTEMPTS = 40

# attempts [start, stop): history match/elim sizes, coupon overlap size
ESCALATION_STAGES = (
    {"name": "strict", "start": 0, "stop": 10, "match_comb": 0, "elim_comb": 2, "coupon_overlap": 1},
    {"name": "no-triple", "start": 10, "stop": 20, "match_comb": 0, "elim_comb": 3, "coupon_overlap": 2},
    {"name": "triple-seen", "start": 20, "stop": 30, "match_comb": 3, "elim_comb": 4, "coupon_overlap": 3},
    {"name": "open", "start": 30, "stop": 40, "match_comb": 0, "elim_comb": 0, "coupon_overlap": 4},
)


def stage_for(attempt):
    """Escalation stage governing a 0-based attempt number."""
    for stage in ESCALATION_STAGES:
        if stage["start"] <= attempt < stage["stop"]:
            return stage
    return ESCALATION_STAGES[-1]


def filter_match_comb(draw, history, match_comb):
    """Draw must share a `match_comb`-subset with some past draw (0 disables)."""
    if not match_comb:
        return {"name": "Match Rule", "passed": True, "detail": "disabled"}
    found = has_match(draw, match_comb, history)
    return {
        "name": "Match Rule",
        "passed": found,
        "detail": f"{match_comb}-subset {'seen' if found else 'never seen'} in history",
    }


def filter_elim_comb(draw, history, elim_comb):
    """Draw must not share an `elim_comb`-subset with any past draw (0 disables)."""
    if not elim_comb:
        return {"name": "Elimination Rule", "passed": True, "detail": "disabled"}
    found = has_match(draw, elim_comb, history)
    return {
        "name": "Elimination Rule",
        "passed": not found,
        "detail": f"{elim_comb}-subset {'seen' if found else 'never seen'} in history",
    }


def history_passes(draw, history, match_comb, elim_comb):
    """Fast path of run_history_filters: (not noMatch) and (not noElim)."""
    no_match = bool(match_comb) and not has_match(draw, match_comb, history)
    no_elim = bool(elim_comb) and has_match(draw, elim_comb, history)
    return not (no_match or no_elim)


def run_history_filters(draw, history, match_comb, elim_comb):
    """
    Run the match and elimination rules.
    Returns: dict with 'passed_count', 'total', 'results' list, 'all_passed' bool.
    """
    results = [
        filter_match_comb(draw, history, match_comb),
        filter_elim_comb(draw, history, elim_comb),
    ]
    passed = sum(1 for r in results if r["passed"])
    return {
        "passed_count": passed,
        "total": len(results),
        "all_passed": passed == len(results),
        "results": results,
    }


def filter_coupon_overlap(draw, coupon, k):
    """Draw must not share a k-subset with a draw already on the coupon."""
    found = has_match(draw, k, coupon)
    return {
        "name": "Coupon Novelty",
        "passed": not found,
        "detail": f"{'shares' if found else 'no'} {k}-subset with coupon",
    }
