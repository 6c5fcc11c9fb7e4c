"""Command-line matchup predictions.

Usage:
    southpaw-predict RED.json BLUE.json [--as-of YYYY-MM-DD] [--json] [--verbose]
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Any

from app.core.logging import configure_logging
from app.prediction_engine import PredictionEngine, Prediction

EXIT_USAGE = 2


def load_profile(path: Path) -> dict[str, Any]:
    """Read one fighter profile from a JSON file.

    Raises:
        ValueError: If the file cannot be read or is not a JSON object
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e.msg} (line {e.lineno})") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def _as_of(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def format_report(prediction: Prediction) -> str:
    """Render a prediction as a plain-text report."""
    b = prediction.breakdown.to_dict()
    lines = [
        "=" * 60,
        f"{prediction.fighter1_name} (red) vs {prediction.fighter2_name} (blue)",
        "=" * 60,
        f"  Red:  {prediction.fighter1_win_probability:.1f}%",
        f"  Blue: {prediction.fighter2_win_probability:.1f}%",
        f"  Confidence: {prediction.confidence_score}/100",
        "",
        "Pillars (positive favours red):",
    ]
    lines.extend(f"  {name:<24}{value:+.2f}" for name, value in b.items())

    if prediction.key_factors:
        lines.append("")
        lines.append("Key factors:")
        lines.extend(f"  - {factor}" for factor in prediction.key_factors)

    if prediction.warnings:
        lines.append("")
        lines.append("Warnings:")
        lines.extend(f"  ! {warning}" for warning in prediction.warnings)

    lines.append("")
    lines.append(prediction.analysis.prediction)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Predict the outcome of a matchup from two fighter profile files"
    )
    parser.add_argument("fighter1", type=Path, help="Red corner profile (JSON)")
    parser.add_argument("fighter2", type=Path, help="Blue corner profile (JSON)")
    parser.add_argument(
        "--as-of",
        type=_as_of,
        default=None,
        help="Reference date for experience (default: today)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the prediction as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log pillar scores and weights",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING", stream=sys.stderr)

    try:
        fighter1 = load_profile(args.fighter1)
        fighter2 = load_profile(args.fighter2)
        prediction = PredictionEngine().predict_matchup(fighter1, fighter2, now=args.as_of)
    except ValueError as e:
        logging.getLogger(__name__).debug("Prediction failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.json:
        print(json.dumps(prediction.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_report(prediction))
    return 0


if __name__ == "__main__":
    sys.exit(main())
