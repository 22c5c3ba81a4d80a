"""Binary tree assessment implementations."""

from .largest_branch import (
    EMPTY,
    EQUAL,
    LEFT,
    RIGHT,
    ROOT,
    BranchComparison,
    BranchLabel,
    InvalidTreeInputError,
    classify,
    compare_branches,
    mirror_level_order,
    render_level_order,
    subtree_sum,
)

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
