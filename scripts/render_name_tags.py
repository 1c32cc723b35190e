#!/usr/bin/env python3
"""
Render name tape labels from the command line.

Prints every candidate label for one name together with how much of the
character budget it uses, or the reference example table with --examples.
"""

from __future__ import annotations

import argparse
import logging

from nametape import NameTapeGenerator
from nametape.examples import example_candidates
from nametape.types import CultureType, NameInput


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render NRIC names into name tape labels.")
    parser.add_argument("name", nargs="?", default="", help="Full name in NRIC order.")
    parser.add_argument(
        "--culture",
        choices=[culture.value for culture in CultureType],
        default=CultureType.CHINESE_ENGLISH.value,
        help="Naming convention to apply.",
    )
    parser.add_argument(
        "--surname-index",
        type=int,
        action="append",
        default=[],
        help="0-based position of a surname token (repeatable). Include BIN, BTE, D/O, S/O.",
    )
    parser.add_argument("--rank", default="", help="Rank and grade printed for MDES servicepersons.")
    parser.add_argument("--mdes", action="store_true", help="Prefix the rank (MDES serviceperson).")
    parser.add_argument("--doctor", action="store_true", help="Prefix DR (medical officer).")
    parser.add_argument("--examples", action="store_true", help="Print the reference example table.")
    parser.add_argument("--verbose", action="store_true", help="Log pipeline decisions.")
    return parser.parse_args(argv)


def _format_label(generator: NameTapeGenerator, label: str) -> str:
    return f"{label:<{generator.character_limit}}  {len(label)}/{generator.character_limit}"


def _print_examples(generator: NameTapeGenerator) -> int:
    mismatches = 0
    for example, candidates in example_candidates(generator):
        name_input = example.name_input
        status = "ok" if candidates[0] == example.expected_label else "MISMATCH"
        if status != "ok":
            mismatches += 1
        print(f"{name_input.name} [{name_input.culture.label}]")
        for label in candidates:
            print(f"  {_format_label(generator, label)}")
        print(f"  expected={example.expected_label} {status}")
    return 1 if mismatches else 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    generator = NameTapeGenerator()

    if args.examples:
        return _print_examples(generator)

    if args.surname_index and min(args.surname_index) < 0:
        raise ValueError("--surname-index must be >= 0")

    name_input = NameInput(
        name=args.name,
        culture=CultureType.from_tag(args.culture),
        surname_indices=tuple(args.surname_index),
        rank=args.rank,
        is_mdes=args.mdes,
        is_doctor=args.doctor,
    )

    for label in generator.generate_candidates(name_input):
        print(_format_label(generator, label))

    print()
    for rule_name in generator.describe_rules(name_input.culture):
        print(f"- {rule_name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
