"""branch-updater testing utilities.

Provides a mock client and fixtures for testing code that drives a run.
"""

from branch_updater.testing.fixtures import (
    create_mock_snapshot,
    create_pull_request_node,
)
from branch_updater.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_snapshot",
    "create_pull_request_node",
]
