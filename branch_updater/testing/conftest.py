"""
Pytest plugin for branch-updater testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["branch_updater.testing.conftest"]

Or import the fixtures directly:

    from branch_updater.testing.fixtures import mock_client, eligible_snapshot
"""

# Re-export all fixtures for pytest auto-discovery
from branch_updater.testing.fixtures import (
    action_context,
    eligible_snapshot,
    mock_client,
    mock_client_with_candidates,
    renovate_snapshot,
)

__all__ = [
    "mock_client",
    "mock_client_with_candidates",
    "action_context",
    "eligible_snapshot",
    "renovate_snapshot",
]
