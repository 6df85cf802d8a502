#!/usr/bin/env python3
"""Score a Sea Salt & Paper hand from two card files."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional, Sequence

from seasalt.evaluators import CatalogError
from seasalt.reader import CardFileError
from seasalt.rules_schema import RulesError, load_rules
from seasalt.scoring import CardEvaluation
from seasalt.service import ScoringService, TurnView


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score a Sea Salt & Paper hand.")
    parser.add_argument("hand", help="Card file for the cards held in hand.")
    parser.add_argument("played", help="Card file for the cards played in front of the player.")
    parser.add_argument("--rules", type=str, default=None, help="JSON file overriding the scoring tables.")
    parser.add_argument(
        "--show-state-changes",
        action="store_true",
        default=os.environ.get("SHOW_STATE_CHANGES") == "true",
        help="Print each card type's points and effects as it is evaluated.",
    )
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def print_state_change(evaluation: CardEvaluation) -> None:
    print(json.dumps(evaluation.as_dict(), indent=2))


def print_summary(view: TurnView) -> None:
    points = int(view.points) if view.is_whole else view.points
    print(f"Points: {points}")
    print("Effects:")
    if view.effects:
        for effect in view.effects:
            print(f"  - {effect}")
    else:
        print("  (none)")
    print("Colors:")
    for color, count in view.color_frequency.items():
        print(f"  {color}: {count}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        rules = load_rules(args.rules) if args.rules else None
        service = ScoringService(
            rules=rules,
            on_evaluation=print_state_change if args.show_state_changes else None,
        )
        view = service.score_files(args.hand, args.played)
    except (OSError, UnicodeDecodeError, CardFileError, CatalogError, RulesError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(view.as_dict(), indent=2))
    else:
        print_summary(view)


if __name__ == "__main__":
    main()
