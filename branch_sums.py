"""Command line tool for the largest binary tree branch classifier.

This script exposes a small harness around
``assessments.binary_tree.largest_branch`` so the classifier can be exercised
directly from the command line.  Each positional argument is a comma separated
level-order array (``null``/``none`` or an empty slot marks a missing node).
Without arguments the built-in demonstration cases are classified and checked
against their expected labels.

The heavy lifting, including input validation and the ASCII rendering, lives in
``largest_branch``; here we only parse arguments and emit status lines.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
import re
import sys
from typing import Iterator, List, Optional, Sequence

from assessments.binary_tree.largest_branch import (
    BranchComparison,
    BranchLabel,
    InvalidTreeInputError,
    compare_branches,
    render_level_order,
)

logger = logging.getLogger(__name__)

_MISSING_TOKENS = frozenset({"", "null", "none"})
_NEGATIVE_ARRAY = re.compile(r"-\.?\d")


@dataclass(frozen=True)
class DemoCase:
    """Container describing a tree example and its expected classification."""

    name: str
    values: Sequence[Optional[float]]
    expected_label: BranchLabel

    def compare(self) -> BranchComparison:
        """Classify the tree associated with this demo case."""

        return compare_branches(self.values)


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase(name="Left-heavy", values=[3, 6, 2, 9, -1, 10], expected_label="Left")
    yield DemoCase(name="Right-heavy", values=[1, 4, 100, 5], expected_label="Right")
    yield DemoCase(name="Balanced", values=[1, 10, 5, 1, 0, 6], expected_label="Equal")
    yield DemoCase(name="Empty", values=[], expected_label="Empty")
    yield DemoCase(name="Root-only", values=[1], expected_label="Root")


def _parse_token(token: str) -> Optional[float]:
    cleaned = token.strip()
    if cleaned.lower() in _MISSING_TOKENS:
        return None
    try:
        return int(cleaned)
    except ValueError:
        pass
    try:
        return float(cleaned)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid node value {token!r}: expected a number, null or none"
        ) from exc


def parse_level_order(raw: str) -> List[Optional[float]]:
    """Parse a comma separated level-order array such as ``"3,6,2,null,1"``."""

    if not raw.strip():
        return []
    return [_parse_token(token) for token in raw.split(",")]


def _format_comparison(comparison: BranchComparison) -> str:
    return (
        f"{comparison.label} "
        f"(left={comparison.left_sum}, right={comparison.right_sum})"
    )


def _format_demo_report(case: DemoCase) -> List[str]:
    """Return formatted output lines for *case*."""

    comparison = case.compare()
    if comparison.label != case.expected_label:
        raise RuntimeError(
            "Demo case expectation mismatch:"
            f" {case.name} expected {case.expected_label}"
            f" but received {comparison.label}"
        )

    header = (
        f"{case.name} tree: {_format_comparison(comparison)}"
        f" (expected: {case.expected_label})"
    )
    return [header, render_level_order(case.values)]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report which branch of a level-order binary tree has the larger sum"
    )
    parser.add_argument(
        "trees",
        nargs="*",
        type=parse_level_order,
        metavar="VALUES",
        help=(
            "Comma separated level-order array, e.g. 3,6,2,9,-1,10. "
            "Runs the built-in demonstration cases when omitted."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def _separate_tree_arguments(argv: Sequence[str]) -> List[str]:
    """Move tree arrays behind ``--`` so negative roots are not read as options."""

    options: List[str] = []
    trees: List[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == "--":
            trees.extend(argv[index + 1 :])
            break
        if token == "--log-level" and index + 1 < len(argv):
            options.extend(argv[index : index + 2])
            index += 2
            continue
        if token.startswith("-") and not _NEGATIVE_ARRAY.match(token):
            options.append(token)
        else:
            trees.append(token)
        index += 1
    if trees:
        options.append("--")
        options.extend(trees)
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """Classify the requested trees, or the demonstration cases, and print them."""

    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_separate_tree_arguments(argv))
    logging.basicConfig(level=getattr(logging, args.log_level))

    if not args.trees:
        for case in _iter_demo_cases():
            for line in _format_demo_report(case):
                print(line)
            print()  # Spacer between cases
        return 0

    for values in args.trees:
        try:
            comparison = compare_branches(values)
        except InvalidTreeInputError as exc:
            logger.error("Failed to classify %s: %s", values, exc)
            return 1
        logger.info("Classified %d values as %s", len(values), comparison.label)
        print(_format_comparison(comparison))
        print(render_level_order(values))
        print()
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
