"""Largest branch classification for level-order encoded binary trees.

A binary tree is supplied as a flat level-order sequence: index ``0`` is the
root and the children of the node stored at index ``i`` live at ``2i + 1`` and
``2i + 2`` whenever those indices fall inside the sequence.  ``None`` entries
mark missing nodes; a missing node hides its whole positional subtree.

The module exposes:

* ``classify`` – returns ``"Left"``, ``"Right"``, ``"Equal"``, ``"Empty"`` or
  ``"Root"`` depending on which branch under the root carries the larger sum.
* ``compare_branches`` – same computation returning a ``BranchComparison``
  with both sums attached.
* ``subtree_sum`` – sum of the subtree rooted at an arbitrary index.
* ``mirror_level_order`` – swaps every node's children, producing the mirror
  image of the tree as a new level-order list.
* ``render_level_order`` – deterministic ASCII rendering, one row per level,
  with missing nodes shown as centred dots.

Traversal relies on index arithmetic and an explicit work-list so very deep
trees never hit the interpreter recursion limit.  Inputs are validated up front
and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from numbers import Real
from typing import List, Literal, Optional, Sequence

logger = logging.getLogger(__name__)

BranchLabel = Literal["Left", "Right", "Equal", "Empty", "Root"]

LEFT: BranchLabel = "Left"
RIGHT: BranchLabel = "Right"
EQUAL: BranchLabel = "Equal"
EMPTY: BranchLabel = "Empty"
ROOT: BranchLabel = "Root"

LEFT_BRANCH_INDEX = 1
RIGHT_BRANCH_INDEX = 2

LevelOrderValue = Optional[Real]


class InvalidTreeInputError(ValueError):
    """Raised when a level-order sequence cannot be interpreted as a tree."""


@dataclass(frozen=True)
class BranchComparison:
    """Outcome of comparing the two branches hanging off the root."""

    label: BranchLabel
    left_sum: Real
    right_sum: Real


def _validate_level_order(values: Sequence[LevelOrderValue]) -> None:
    """Validate *values* raising :class:`InvalidTreeInputError` when invalid."""

    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, Sequence):
        raise InvalidTreeInputError(
            f"level-order values must be a sequence, got {type(values).__name__}"
        )
    for position, item in enumerate(values):
        if item is None:
            if position == 0:
                raise InvalidTreeInputError("the root of a tree cannot be None")
            continue
        if isinstance(item, bool) or not isinstance(item, Real):
            raise InvalidTreeInputError(
                f"level-order values must be real numbers or None, got {item!r} "
                f"at index {position}"
            )
        if not math.isfinite(item):
            raise InvalidTreeInputError(
                f"node values must be finite, got {item!r} at index {position}"
            )


def _sum_from(values: Sequence[LevelOrderValue], start: int) -> Real:
    """Sum the subtree rooted at *start* assuming *values* is already valid.

    Floats go through :func:`math.fsum` so the result does not depend on the
    visiting order; ``int`` and ``Fraction`` sums stay exact.
    """

    collected: List[Real] = []
    pending: List[int] = [start]
    size = len(values)
    while pending:
        index = pending.pop()
        if index >= size:
            continue
        value = values[index]
        if value is None:
            continue
        collected.append(value)
        pending.append(2 * index + 2)
        pending.append(2 * index + 1)
    if any(isinstance(value, float) for value in collected):
        try:
            return math.fsum(collected)
        except OverflowError:
            logger.debug("fsum overflowed for subtree %d; using plain addition", start)
            return sum(collected)
    return sum(collected)


def subtree_sum(values: Sequence[LevelOrderValue], index: int) -> Real:
    """Return the sum of the subtree rooted at *index*.

    An out-of-bounds or missing node yields ``0``.  Negative indices are
    rejected since they do not name a position in the level-order layout.
    """

    _validate_level_order(values)
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidTreeInputError("subtree index must be an integer")
    if index < 0:
        raise InvalidTreeInputError("subtree index must be non-negative")
    return _sum_from(values, index)


def compare_branches(values: Sequence[LevelOrderValue]) -> BranchComparison:
    """Compare the left and right branch sums of the tree encoded by *values*."""

    _validate_level_order(values)
    if not values:
        return BranchComparison(label=EMPTY, left_sum=0, right_sum=0)
    if len(values) == 1:
        return BranchComparison(label=ROOT, left_sum=0, right_sum=0)

    left_sum = _sum_from(values, LEFT_BRANCH_INDEX)
    right_sum = _sum_from(values, RIGHT_BRANCH_INDEX)
    if left_sum > right_sum:
        label = LEFT
    elif right_sum > left_sum:
        label = RIGHT
    else:
        label = EQUAL
    logger.debug("Branch sums: left=%s right=%s -> %s", left_sum, right_sum, label)
    return BranchComparison(label=label, left_sum=left_sum, right_sum=right_sum)


def classify(values: Sequence[LevelOrderValue]) -> BranchLabel:
    """Return which branch of the tree encoded by *values* has the larger sum.

    Parameters
    ----------
    values:
        Level-order sequence of real numbers, optionally containing ``None``
        for missing nodes.

    Returns
    -------
    str
        ``"Empty"`` for an empty sequence, ``"Root"`` when only the root is
        present, otherwise ``"Left"``, ``"Right"`` or ``"Equal"``.  A branch
        whose root index lies past the end of the sequence sums to ``0``.

    Raises
    ------
    InvalidTreeInputError
        If *values* is not a sequence, contains a non-numeric or non-finite
        entry, or starts with ``None``.
    """

    return compare_branches(values).label


def _mirror_index(index: int) -> int:
    level = (index + 1).bit_length() - 1
    level_start = (1 << level) - 1
    return 2 * level_start - (index - level_start)


def mirror_level_order(values: Sequence[LevelOrderValue]) -> List[LevelOrderValue]:
    """Return a new level-order list describing the mirror image of *values*."""

    _validate_level_order(values)
    if not values:
        return []
    mirrored_size = max(_mirror_index(index) for index in range(len(values))) + 1
    mirrored: List[LevelOrderValue] = [None] * mirrored_size
    for index, value in enumerate(values):
        mirrored[_mirror_index(index)] = value
    while mirrored and mirrored[-1] is None:
        mirrored.pop()
    return mirrored


def render_level_order(values: Sequence[LevelOrderValue]) -> str:
    """Render *values* level-by-level, marking missing nodes with ``·``.

    Level ``L`` covers indices ``[2**L - 1, 2**(L + 1) - 1)``.  Rendering stops
    at the first level without a real node, so placeholder-only rows never
    trail the output.
    """

    _validate_level_order(values)
    if not values:
        return "<empty>"

    size = len(values)
    present: List[bool] = [False] * size
    for index, value in enumerate(values):
        present[index] = value is not None and (index == 0 or present[(index - 1) // 2])

    lines: List[str] = []
    start, width = 0, 1
    while start < size:
        row = [
            str(values[index]) if index < size and present[index] else "·"
            for index in range(start, start + width)
        ]
        lines.append(" ".join(row))
        start, width = start + width, width * 2
        if not any(present[start : start + width]):
            break

    return "\n".join(lines)


__all__ = [
    "BranchComparison",
    "BranchLabel",
    "EMPTY",
    "EQUAL",
    "InvalidTreeInputError",
    "LEFT",
    "RIGHT",
    "ROOT",
    "classify",
    "compare_branches",
    "mirror_level_order",
    "render_level_order",
    "subtree_sum",
]
