"""Pull request snapshot model and the GitHub GraphQL enums it carries."""

import enum
from dataclasses import dataclass, field


class MergeStateStatus(str, enum.Enum):
    """Mergeability of a pull request relative to its base branch."""

    BEHIND = "BEHIND"
    BLOCKED = "BLOCKED"
    CLEAN = "CLEAN"
    DIRTY = "DIRTY"
    DRAFT = "DRAFT"
    HAS_HOOKS = "HAS_HOOKS"
    UNKNOWN = "UNKNOWN"
    UNSTABLE = "UNSTABLE"


class MergeableState(str, enum.Enum):
    """Whether a pull request can be merged without conflicts."""

    MERGEABLE = "MERGEABLE"
    CONFLICTING = "CONFLICTING"
    UNKNOWN = "UNKNOWN"


class StatusState(str, enum.Enum):
    """Aggregated state of all checks on a commit."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    PENDING = "PENDING"
    ERROR = "ERROR"
    EXPECTED = "EXPECTED"


@dataclass(frozen=True)
class PullRequestSnapshot:
    """Read-only view of an open pull request at fetch time."""

    id: str
    number: int
    title: str
    author_login: str  # "" when the author account no longer exists
    is_draft: bool
    merge_state_status: MergeStateStatus
    mergeable: MergeableState
    has_auto_merge_enabled: bool
    check_rollup_state: StatusState | None
    labels: frozenset[str] = field(default_factory=frozenset)

    def has_label(self, name: str) -> bool:
        """Check whether a label is attached to the pull request."""
        return name in self.labels
