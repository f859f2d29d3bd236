"""
Pytest fixtures for branch-updater testing.

Provides common fixtures for tests that drive a run against a mock client.
"""

from collections.abc import Iterable
from typing import Any, Generator

import pytest

from branch_updater.context import ActionContext
from branch_updater.testing.mock import MockGitHubClient
from branch_updater.types.pulls import (
    MergeableState,
    MergeStateStatus,
    PullRequestSnapshot,
    StatusState,
)


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client, action_context):
            mock_client.pulls.configure_list_open(response=[...])
            run(action_context, client=mock_client)
            assert mock_client.was_called("pulls.update_branch")
        ```
    """
    client = MockGitHubClient()
    yield client
    client.reset()


@pytest.fixture
def action_context() -> ActionContext:
    """Provide a run configuration for octo-org/hello-world."""
    return ActionContext(token="ghs_testtoken", owner="octo-org", repo="hello-world")


# ============================================================================
# Snapshot Fixtures
# ============================================================================


@pytest.fixture
def eligible_snapshot() -> PullRequestSnapshot:
    """Provide a green, auto-merge enabled pull request by a human author."""
    return create_mock_snapshot(number=101, author_login="alice")


@pytest.fixture
def renovate_snapshot() -> PullRequestSnapshot:
    """Provide an eligible Renovate pull request without the rebase label."""
    return create_mock_snapshot(
        number=102,
        author_login="renovate",
        title="chore(deps): update dependency httpx to v0.28.1",
    )


@pytest.fixture
def mock_client_with_candidates(
    mock_client: MockGitHubClient,
    renovate_snapshot: PullRequestSnapshot,
    eligible_snapshot: PullRequestSnapshot,
) -> MockGitHubClient:
    """
    Provide a MockGitHubClient whose query returns a Renovate PR followed
    by a human-authored PR.
    """
    mock_client.pulls.configure_list_open(
        response=[renovate_snapshot, eligible_snapshot]
    )
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_snapshot(
    number: int = 1,
    author_login: str = "alice",
    labels: Iterable[str] = (),
    **kwargs: Any,
) -> PullRequestSnapshot:
    """
    Create a PullRequestSnapshot with customizable fields.

    Defaults describe a pull request that is eligible for action: auto-merge
    enabled, mergeable, green checks, not a draft, up to date with its base.

    Args:
        number: Pull request number
        author_login: Author login
        labels: Label names
        **kwargs: Additional fields to override

    Returns:
        PullRequestSnapshot object
    """
    defaults: dict[str, Any] = {
        "id": f"PR_kwDOtest{number}",
        "title": f"Test PR #{number}",
        "is_draft": False,
        "merge_state_status": MergeStateStatus.CLEAN,
        "mergeable": MergeableState.MERGEABLE,
        "has_auto_merge_enabled": True,
        "check_rollup_state": StatusState.SUCCESS,
    }
    defaults.update(kwargs)
    return PullRequestSnapshot(
        number=number,
        author_login=author_login,
        labels=frozenset(labels),
        **defaults,
    )


def create_pull_request_node(
    number: int = 1,
    author_login: str | None = "alice",
    labels: Iterable[str] = (),
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create a pull request node as the GraphQL API returns it.

    Args:
        number: Pull request number
        author_login: Author login, or None for a deleted account
        labels: Label names
        **kwargs: Fields to override (GraphQL field names)

    Returns:
        Dict shaped like one ``pullRequests.nodes`` entry
    """
    node: dict[str, Any] = {
        "id": f"PR_kwDOtest{number}",
        "title": f"Test PR #{number}",
        "author": {"login": author_login} if author_login is not None else None,
        "labels": {"nodes": [{"name": name} for name in labels]},
        "number": number,
        "isDraft": False,
        "mergeStateStatus": "CLEAN",
        "mergeable": "MERGEABLE",
        "autoMergeRequest": {"enabledAt": "2026-01-01T00:00:00Z"},
        "statusCheckRollup": {"state": "SUCCESS"},
    }
    node.update(kwargs)
    return node
