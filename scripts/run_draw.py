#!/usr/bin/env python3
"""
Standalone draw script.
Prints history statistics and a generated coupon for a CSV history.

Usage: run_draw.py HISTORY_CSV [COUNT] [super|sayisal] [SEED]
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lotto.config import SAYISAL_LOTTO, SUPER_LOTTO
from lotto.engine import LottoEngine
from lotto.history import load_history

GAMES = {"super": SUPER_LOTTO, "sayisal": SAYISAL_LOTTO}


def main(argv):
    if len(argv) < 2:
        print(__doc__.strip().splitlines()[-1])
        return 1

    csv_path = argv[1]
    count = int(argv[2]) if len(argv) > 2 else 17
    config = GAMES[argv[3]] if len(argv) > 3 else SUPER_LOTTO
    seed = int(argv[4]) if len(argv) > 4 else None

    print("Loading data...")
    history = load_history(csv_path)
    print(f"Loaded {len(history)} draws")

    engine = LottoEngine(history, config, seed=seed)

    print(f"\n{'='*70}")
    print(f"STATISTICS ({config.name})")
    print(f"{'='*70}")
    summary = engine.summary()
    print(f"  Hot:  {', '.join(str(n) for n in summary['hot'])}")
    print(f"  Cold: {', '.join(str(n) for n in summary['cold'])}")
    for k, c in summary["match_counts"].items():
        print(f"  Draw pairs sharing a {k}-subset: {c:,}")

    print("\nTop lucky triples:")
    report = engine.lucky_report(3, top=5)
    for _, row in report["dataframe"].iterrows():
        print(f"  {row['label']}  {row['pair_count']} pairs, "
              f"~{row['draws_together']} draws together")

    print(f"\n{'='*70}")
    print(f"COUPON ({count} draws)")
    print(f"{'='*70}")
    coupon = engine.generate(count, verbose=True)
    for i, draw in enumerate(coupon):
        extra = ""
        if coupon.supplementary:
            extra = f" + SS {coupon.supplementary[i]:2d}"
        flag = "  *relaxed*" if draw.relaxed else ""
        print(f"  {i + 1:3d}. {' '.join(f'{n:2d}' for n in draw)}{extra}  {draw.label}{flag}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
