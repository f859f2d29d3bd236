"""branch-updater resource clients."""

from branch_updater.clients.issues import IssuesClient
from branch_updater.clients.pulls import PullsClient

__all__ = [
    "IssuesClient",
    "PullsClient",
]
