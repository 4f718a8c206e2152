"""
Coupon Assembly

Fills a requested number of draw slots: date-seeded draws, one draw per
frequency strategy under an escalating novelty ladder, lucky-number
draws, and (for games that have one) a supplementary ball per draw.
"""
import warnings
from datetime import date

from lotto.analysis import ball_stats, supplementary_stats
from lotto.config import make_rng
from lotto.filters import (
    ESCALATION_ATTEMPTS,
    ESCALATION_STAGES,
    filter_coupon_overlap,
    run_history_filters,
    stage_for,
)
from lotto.history import Coupon, DrawHistory
from lotto.lucky import mine_lucky
from lotto.models import draw_by_strategy
from lotto.models.date_seeded import draw_by_date
from lotto.models.lucky_draw import LuckyTables, build_lucky_draw

STANDARD_SEQUENCE = ("norm", "blend1", "blend2", "left", "side", "random")
SUPPLEMENTARY_SEQUENCE = ("norm", "random", "blend1", "blend2", "norm")
SUPPLEMENTARY_TRIES = 6

FIRST_CHUNK = 8
STANDARD_CHUNK = 6
LUCKY_CHUNK = 3
LUCKY_SLOT_ATTEMPTS = 50


class RelaxedDrawWarning(UserWarning):
    """A coupon slot was filled by a draw that broke the weakest novelty rule."""


# ── Helpers ──────────────────────────────────────────────────────────────

def plan_chunks(count):
    """
    Split a request into the standard / lucky chunk layout.

    The first chunk is 8 standard draws (date pair included), then lucky
    chunks of 3 alternate with standard chunks of 6; the last chunk holds
    whatever remains.
    """
    chunks = []
    remaining = count
    lucky_next = False
    while remaining > 0:
        if not chunks:
            size, mode, by_date = FIRST_CHUNK, "standard", True
        elif lucky_next:
            size, mode, by_date = LUCKY_CHUNK, "lucky", False
        else:
            size, mode, by_date = STANDARD_CHUNK, "standard", False
        take = min(size, remaining)
        chunks.append({"mode": mode, "count": take, "by_date": by_date})
        remaining -= take
        lucky_next = mode == "standard"
    return chunks


def lucky_novelty(coupon_size, total_count):
    """Subset size that must not be shared with the coupon at this fill level."""
    third = total_count // 3
    if coupon_size < third:
        return 2
    if coupon_size < 2 * third:
        return 3
    return 4


def load_lucky_tables(history, config, verbose=False):
    return LuckyTables(mine_lucky(history, 2, verbose=verbose),
                       mine_lucky(history, 3, verbose=verbose),
                       config.lucky_floor)


# ── Standard Strategies ──────────────────────────────────────────────────

def escalate_strategy(strategy, stats, history, coupon, config, rng, verbose=False):
    """
    Run one strategy through the escalation ladder.

    Each attempt draws under the stage's history rules and is kept when it
    passes them and shares no stage-sized subset with the coupon. After the
    last stage the final draw is kept regardless.
    """
    draw = None
    for attempt in range(ESCALATION_ATTEMPTS):
        stage = stage_for(attempt)
        draw = draw_by_strategy(strategy, stats, history, config, rng,
                                stage["match_comb"], stage["elim_comb"])
        # strategies flag draws that never passed the history rules
        if draw.relaxed:
            if verbose:
                result = run_history_filters(draw, history, stage["match_comb"],
                                             stage["elim_comb"])
                failed = "; ".join(r["detail"] for r in result["results"] if not r["passed"])
                print(f"  [Coupon] {draw.label}: attempt {attempt} ({stage['name']}) "
                      f"rejected, {failed}")
            continue

        novelty = filter_coupon_overlap(draw, coupon, stage["coupon_overlap"])
        if novelty["passed"]:
            if verbose:
                print(f"  [Coupon] {draw.label}: accepted at attempt {attempt} "
                      f"({stage['name']})")
            return draw
        if verbose:
            print(f"  [Coupon] {draw.label}: attempt {attempt} ({stage['name']}) "
                  f"rejected, {novelty['detail']}")

    draw.relaxed = True
    warnings.warn(
        f"{draw.label} draw {list(draw.numbers)} shares a "
        f"{ESCALATION_STAGES[-1]['coupon_overlap']}-subset with the coupon",
        RelaxedDrawWarning,
    )
    return draw


def draw_balls(coupon, count, stats, history, config, rng, by_date=True, today=None,
               verbose=False):
    """
    Append `count` standard draws to the coupon.

    Order: two date-seeded draws (if `by_date`), then norm, blend1, blend2,
    left, side, random, repeating the sequence if more slots remain.

    Returns the number of draws appended.
    """
    remaining = count
    if by_date and remaining:
        for draw in draw_by_date(stats, config, rng, today=today):
            if not remaining:
                break
            coupon.append(draw)
            remaining -= 1

    while remaining:
        for strategy in STANDARD_SEQUENCE:
            if not remaining:
                break
            coupon.append(escalate_strategy(strategy, stats, history, coupon, config, rng,
                                            verbose=verbose))
            remaining -= 1
    return count


# ── Lucky Mode ───────────────────────────────────────────────────────────

def draw_balls_by_lucky(coupon, count, total_count, stats, history, config, rng,
                        tables=None, verbose=False):
    """
    Append `count` lucky-number draws to the coupon.

    Novelty against the coupon tightens with the request size: no shared
    2-subset in the first third of `total_count`, no shared 3-subset in the
    second, no shared 4-subset afterwards. A slot that cannot meet its
    rule within LUCKY_SLOT_ATTEMPTS tries moves to the next weaker rule;
    past the 4-subset rule the last draw is kept.
    """
    if tables is None:
        tables = load_lucky_tables(history, config, verbose=verbose)

    for slot in range(count):
        k = lucky_novelty(len(coupon), total_count)
        draw = None
        accepted = False
        while not accepted:
            for _ in range(LUCKY_SLOT_ATTEMPTS):
                draw = build_lucky_draw(slot, tables, stats, config, rng)
                if filter_coupon_overlap(draw, coupon, k)["passed"]:
                    accepted = True
                    break
            if accepted:
                break
            if k >= 4:
                draw.relaxed = True
                warnings.warn(
                    f"{draw.label} draw {list(draw.numbers)} shares a 4-subset with the coupon",
                    RelaxedDrawWarning,
                )
                break
            if verbose:
                print(f"  [Coupon] lucky slot {slot}: relaxing novelty {k} -> {k + 1}")
            k += 1
        coupon.append(draw)
    return count


# ── Supplementary Ball ───────────────────────────────────────────────────

def draw_supplementary(count, history, config, rng):
    """
    One supplementary ball per draw, avoiding balls already picked.

    Strategies are tried in turn (6 tries each); when all fail the last
    ball is used anyway.
    """
    ss_config = config.supplementary_config()
    stats = supplementary_stats(history, config.total_ball_ss)
    no_history = DrawHistory()
    picked = []
    for _ in range(count):
        ball = None
        for strategy in SUPPLEMENTARY_SEQUENCE:
            for _ in range(SUPPLEMENTARY_TRIES):
                ball = draw_by_strategy(strategy, stats, no_history, ss_config, rng)[0]
                if ball not in picked:
                    break
            if ball not in picked:
                break
        picked.append(ball)
    return picked


# ── Coupon ───────────────────────────────────────────────────────────────

def generate_coupon(history, count, config, rng=None, today=None, tables=None,
                    verbose=False):
    """
    Generate `count` draws following the chunk plan.

    Parameters
    ----------
    history : DrawHistory
    count : int
    config : GameConfig
    rng : np.random.RandomState or int seed, optional
    today : datetime.date, optional
        Date for the date-seeded pair; defaults to the current date.
    tables : LuckyTables, optional
        Pre-mined lucky tables; mined on first use otherwise.

    Returns
    -------
    Coupon with exactly `count` draws
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    rng = make_rng(rng)
    today = today or date.today()
    stats = ball_stats(history, config.total_ball)
    coupon = Coupon()

    chunks = plan_chunks(count)
    if verbose:
        print(f"  [Coupon] {count} draws in {len(chunks)} chunks over {len(history)} past draws")

    for chunk in chunks:
        if chunk["mode"] == "lucky":
            if tables is None:
                tables = load_lucky_tables(history, config, verbose=verbose)
            draw_balls_by_lucky(coupon, chunk["count"], count, stats, history, config, rng,
                                tables=tables, verbose=verbose)
        else:
            draw_balls(coupon, chunk["count"], stats, history, config, rng,
                       by_date=chunk["by_date"], today=today, verbose=verbose)

    if config.has_supplementary:
        coupon.supplementary = draw_supplementary(count, history, config, rng)

    if verbose:
        print(f"  [Coupon] done: {len(coupon)} draws, {coupon.relaxed_count} relaxed")
    return coupon
