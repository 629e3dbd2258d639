"""Command-line entry point.

Loads applicant, project and opportunity records from JSON or YAML files,
runs the engine once and prints the results as JSON on stdout:

    grant-matcher rank --applicant applicant.json --project project.json \\
        --opportunities opportunities.yaml --only-eligible --page-size 10
    grant-matcher check --applicant applicant.json --opportunity opportunity.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

from .config import load_config
from .eligibility import check_eligibility
from .errors import MalformedInputError
from .models import RankingOptions
from .ranking import rank
from .scorer import load_weights

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MALFORMED_INPUT = 2


def _load_records(path: str) -> Any:
    """Read a JSON or YAML file."""
    file_path = Path(path)
    with open(file_path, "r") as f:
        if file_path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grant-matcher",
        description="Check eligibility and rank funding opportunities for an applicant.",
    )
    parser.add_argument("--log-level", help="Override configured log level (e.g. DEBUG)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Eligibility verdict for one opportunity")
    check.add_argument("--applicant", required=True, help="Applicant profile file (.json/.yaml)")
    check.add_argument("--opportunity", required=True, help="Opportunity file (.json/.yaml)")

    ranking = subparsers.add_parser("rank", help="Rank a list of opportunities")
    ranking.add_argument("--applicant", required=True, help="Applicant profile file (.json/.yaml)")
    ranking.add_argument("--project", required=True, help="Project file (.json/.yaml)")
    ranking.add_argument("--opportunities", required=True, help="File holding a list of opportunities")
    ranking.add_argument("--only-eligible", action="store_true", help="Drop ineligible opportunities")
    ranking.add_argument("--exclude-warnings", action="store_true", help="Drop opportunities with warnings")
    ranking.add_argument("--min-confidence", type=float, help="Confidence floor (with --only-eligible)")
    ranking.add_argument("--page-size", type=int, help="Maximum results to print")
    ranking.add_argument("--offset", type=int, default=0, help="Skip this many ranked results")
    ranking.add_argument("--weights", help="Fit weights file (.json/.yaml)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()

    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        if args.command == "check":
            verdict = check_eligibility(
                _load_records(args.applicant),
                _load_records(args.opportunity),
                warning_penalty=config.warning_penalty,
            )
            output = verdict.model_dump(mode="json")
        else:
            options = RankingOptions(
                only_eligible=args.only_eligible,
                exclude_warnings=args.exclude_warnings,
                min_confidence=args.min_confidence,
                page_size=args.page_size or config.default_page_size,
                offset=args.offset,
                max_workers=config.max_workers,
            )
            weights = load_weights(args.weights or config.weights_file)
            results = rank(
                _load_records(args.applicant),
                _load_records(args.project),
                _load_records(args.opportunities) or [],
                options,
                weights=weights,
                warning_penalty=config.warning_penalty,
            )
            output = [result.model_dump(mode="json") for result in results]
    except MalformedInputError as e:
        logger.error("Rejected input: %s", e)
        return EXIT_MALFORMED_INPUT
    except (OSError, ValueError, yaml.YAMLError) as e:
        # Unreadable files, unparsable JSON/YAML and out-of-range options
        logger.error("Could not read input: %s", e)
        return EXIT_MALFORMED_INPUT

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
