#!/usr/bin/env python3
"""CLI for the Wine Quality Predictor."""

import argparse
import json
import sys
from pathlib import Path

import jsonschema

from src.features import DEMO_DATA, FEATURE_KEYS, TOOLTIPS
from src.run_report import write_run_report
from src.validation import InvalidInputError
from wine_predictor.audit import setup_app_logging, use_log_dir
from wine_predictor.config import Settings
from wine_predictor.predictor import describe_noise, run_prediction
from wine_predictor.presenter import render_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Predict wine quality (Good/Poor) from its chemistry."
    )
    for key in FEATURE_KEYS:
        parser.add_argument(
            f"--{key}",
            dest=key.replace("-", "_"),
            default=None,
            help=TOOLTIPS.get(key, "0 = red, 1 = white" if key == "wine-type" else None),
        )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Start from the demo sample; explicit feature flags override it",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the noise term (default: WINE_NOISE_SEED or unseeded)",
    )
    parser.add_argument(
        "--no-noise",
        action="store_true",
        help="Disable the noise term for a fully deterministic score",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Artificial processing delay in seconds (default: 0)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the prediction as JSON",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a run report JSON to this path",
    )
    return parser


def collect_fields(args: argparse.Namespace) -> dict:
    raw = dict(DEMO_DATA) if args.demo else {}
    for key in FEATURE_KEYS:
        value = getattr(args, key.replace("-", "_"))
        if value is not None:
            raw[key] = value
    return raw


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    use_log_dir(settings.log_dir)
    log = setup_app_logging()

    seed = args.seed if args.seed is not None else settings.noise_seed
    noise = 0.0 if args.no_noise else None

    try:
        out = run_prediction(
            collect_fields(args),
            delay_seconds=args.delay,
            seed=seed,
            noise=noise,
            source="cli",
        )
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except jsonschema.ValidationError as e:
        print(f"Error: Invalid wine input: {e.message}", file=sys.stderr)
        return 1

    if args.report:
        write_run_report(
            args.report,
            run_id=out["run_id"],
            record=out["inputs"],
            scoring_version=out["scoring_version"],
            score_result=out["result"],
            noise=describe_noise(seed, noise),
        )
        log.info("Run report written: %s", args.report)

    if args.json:
        print(json.dumps({
            "run_id": out["run_id"],
            "prediction": out["result"],
            "panel": out["panel"],
            "validity": out["validity"],
        }, indent=2))
    else:
        print(render_text(out["panel"]))
        out_of_range = [k for k, state in out["validity"].items() if state == "invalid"]
        if out_of_range:
            print(f"\nWarning: outside typical range: {', '.join(out_of_range)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
