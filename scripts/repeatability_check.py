#!/usr/bin/env python3
"""
Repeatability harness: score the same wine N times; assert identical results.
Runs two modes: zero noise, and a fixed noise seed (fresh RNG per run).
Also checks that unseeded runs stay inside the noise band around the zero-noise score.
Exits 0 if stable, 1 if unstable. Prints variance report on failure.

Usage: python scripts/repeatability_check.py [--runs 10] [--seed 42] [--input sample.json]
"""

import argparse
import json
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.features import DEMO_DATA
from src.scoring import predict
from src.scoring.engine import NOISE_AMPLITUDE
from src.utils import hash_record
from src.validation import build_input_record

DEFAULT_RUNS = 10
DEFAULT_SEED = 42


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--input", type=Path, default=None, help="JSON file keyed by feature name (default: demo sample)")
    args = parser.parse_args()

    if args.input:
        if not args.input.exists():
            print(f"Error: input file not found: {args.input}", file=sys.stderr)
            sys.exit(1)
        raw = json.loads(args.input.read_text(encoding="utf-8"))
    else:
        raw = DEMO_DATA
    record = build_input_record(raw)

    print(f"Scoring {args.runs} times per mode (input_hash={hash_record(record)[:16]})...")
    zero = [predict(record, noise=0.0).to_dict() for _ in range(args.runs)]
    seeded = [predict(record, rng=random.Random(args.seed)).to_dict() for _ in range(args.runs)]
    unseeded = [predict(record).to_dict() for _ in range(args.runs)]

    variances = []
    for mode, results in (("zero_noise", zero), ("seeded", seeded)):
        first = results[0]
        for i, r in enumerate(results[1:], start=2):
            if r != first:
                diff = {k: (r[k], first[k]) for k in first if r[k] != first[k]}
                variances.append((mode, i, f"diff: {diff}"))

    baseline = zero[0]["score"]
    half_band = NOISE_AMPLITUDE / 2
    for i, r in enumerate(unseeded, start=1):
        if abs(r["score"] - baseline) > half_band + 1e-9 and 0.0 < r["score"] < 1.0:
            variances.append(("noise_band", i, f"score {r['score']:.4f} outside {baseline:.4f} ± {half_band}"))

    if variances:
        print("\n=== VARIANCE REPORT ===\n")
        for mode, run, detail in variances:
            print(f"  Run {run} - {mode}: {detail}")
        print("\nRepeatability check FAILED.")
        sys.exit(1)

    scores = [r["score"] for r in unseeded]
    print("\nPASS: Repeatability check passed.")
    print("\n--- Run metrics ---")
    print(f"  runs: {args.runs}")
    print(f"  zero_noise: verdict={zero[0]['verdict']} score={baseline:.4f} confidence={zero[0]['confidence']:.2f}")
    print(f"  seeded (seed={args.seed}): score={seeded[0]['score']:.4f}")
    print(f"  unseeded score range: min={min(scores):.4f}, max={max(scores):.4f}")
    print(f"  top features: {', '.join(f['name'] + '=' + str(f['value']) for f in zero[0]['features'])}")
    sys.exit(0)


if __name__ == "__main__":
    main()
