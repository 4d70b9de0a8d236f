"""
Manual evaluation runner for PhishCheck.

Loads docs/manual_eval_urls.csv (or a CSV given on the command line),
runs evaluate on each URL, and prints confusion counts + sample
disagreements. Labels are 'phishing' or 'legitimate'.
"""

from __future__ import annotations

import csv
import sys
from collections import Counter
from pathlib import Path

from .config import configure_logging, get_seed
from .scoring import ANALYSIS_FAILED, PHISHING, evaluate
from .simulation import SimulatedRegistry


def predicted_label(verdict: str) -> str:
    if verdict == PHISHING:
        return "phishing"
    if verdict == ANALYSIS_FAILED:
        return "failed"
    return "legitimate"


def main() -> None:
    configure_logging()

    if len(sys.argv) > 1:
        eval_path = Path(sys.argv[1])
    else:
        # repo root = phishcheck/..
        root = Path(__file__).resolve().parents[1]
        eval_path = root / "docs" / "manual_eval_urls.csv"

    if not eval_path.exists():
        raise SystemExit(f"Manual eval file not found: {eval_path}")

    rows = []
    with eval_path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            url = (row.get("url") or "").strip()
            label = (row.get("label") or "").strip()
            if not url or not label:
                continue
            rows.append(row)

    registry = SimulatedRegistry.seeded(get_seed())
    results = []
    for row in rows:
        url = row["url"].strip()
        true_label = row["label"].strip()
        notes = (row.get("notes") or "").strip()
        r = evaluate(url, registry)
        results.append((url, true_label, notes, r))

    counts = Counter()
    for _, true_label, _, r in results:
        counts[(true_label, predicted_label(r["verdict"]))] += 1

    print("Confusion (label -> verdict):")
    for (true_label, pred), c in sorted(counts.items()):
        print(f"  {true_label:10s} -> {pred:10s}: {c}")

    print("\nSample disagreements:")
    for url, true_label, notes, r in results:
        pred = predicted_label(r["verdict"])
        if true_label == pred:
            continue
        print(f"- URL:        {url}")
        print(f"  label:      {true_label}")
        print(f"  verdict:    {r['verdict']}")
        if "error" not in r:
            print(f"  risk:       {r['risk_percentage']}% ({r['risk_level']})")
            print(f"  reasons:    {' '.join(r['reasons'])}")
        if notes:
            print(f"  notes:      {notes}")
        print()


if __name__ == "__main__":
    main()
