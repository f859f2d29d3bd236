"""branch-updater type definitions."""

from branch_updater.types.pulls import (
    MergeableState,
    MergeStateStatus,
    PullRequestSnapshot,
    StatusState,
)

__all__ = [
    "PullRequestSnapshot",
    "MergeStateStatus",
    "MergeableState",
    "StatusState",
]
