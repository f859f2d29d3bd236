"""branch-updater - keeps the oldest auto-merge pull request moving toward merge."""

from branch_updater.action import fetch_candidates, main, run
from branch_updater.client import GitHubClient
from branch_updater.context import ActionContext
from branch_updater.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BranchUpdaterError,
    ConfigurationError,
    GraphQLError,
    NotFoundError,
    RateLimitedError,
    ResponseFormatError,
    ServerError,
    ValidationError,
)
from branch_updater.logging import configure_logging, get_logger
from branch_updater.selection import (
    Decision,
    Outcome,
    RunResult,
    is_eligible,
    plan,
    select_and_act,
)
from branch_updater.transport import HTTPTransport
from branch_updater.types import (
    MergeableState,
    MergeStateStatus,
    PullRequestSnapshot,
    StatusState,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Entry points
    "main",
    "run",
    "fetch_candidates",
    # Selection
    "is_eligible",
    "plan",
    "select_and_act",
    "Decision",
    "Outcome",
    "RunResult",
    # Client
    "GitHubClient",
    "HTTPTransport",
    "ActionContext",
    # Types
    "PullRequestSnapshot",
    "MergeStateStatus",
    "MergeableState",
    "StatusState",
    # Exceptions
    "BranchUpdaterError",
    "ConfigurationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "GraphQLError",
    "ResponseFormatError",
    # Logging
    "configure_logging",
    "get_logger",
]
