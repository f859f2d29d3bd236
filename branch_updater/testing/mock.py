"""
Mock GitHub client for testing.

Provides a MockGitHubClient that mimics the real client interface
without making actual API calls.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, TypeVar

from branch_updater.types.pulls import PullRequestSnapshot

T = TypeVar("T")


@dataclass
class MockResponse:
    """Configuration for a mock response."""

    data: Any
    error: Exception | None = None
    call_count: int = 0


@dataclass
class MockCall:
    """Record of a method call."""

    method: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class _MockResourceClient:
    def __init__(self, mock_client: "MockGitHubClient") -> None:
        self._mock = mock_client
        self._responses: dict[str, MockResponse] = {}

    def _get_response(self, method: str, default: T) -> T:
        """Get configured response or default."""
        if method in self._responses:
            resp = self._responses[method]
            resp.call_count += 1
            if resp.error:
                raise resp.error
            if resp.data is not None:
                return resp.data
        return default


class MockPullsClient(_MockResourceClient):
    """Mock pulls client for testing."""

    def configure_list_open(
        self,
        response: list[PullRequestSnapshot] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Configure the response for list_open() calls."""
        self._responses["list_open"] = MockResponse(data=response, error=error)

    def configure_update_branch(
        self,
        response: dict[str, Any] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Configure the response for update_branch() calls."""
        self._responses["update_branch"] = MockResponse(data=response, error=error)

    def list_open(
        self,
        owner: str,
        repo: str,
        base_branch: str = "main",
    ) -> list[PullRequestSnapshot]:
        """Mock list_open method."""
        self._mock._record_call(
            "pulls.list_open",
            (owner, repo),
            {"base_branch": base_branch},
        )
        return self._get_response("list_open", [])

    def update_branch(self, owner: str, repo: str, number: int) -> dict[str, Any]:
        """Mock update_branch method."""
        self._mock._record_call("pulls.update_branch", (owner, repo, number), {})
        return self._get_response("update_branch", {
            "message": "Updating pull request branch.",
            "url": f"https://github.com/{owner}/{repo}/pull/{number}",
        })


class MockIssuesClient(_MockResourceClient):
    """Mock issues client for testing."""

    def configure_add_labels(
        self,
        response: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Configure the response for add_labels() calls."""
        self._responses["add_labels"] = MockResponse(data=response, error=error)

    def add_labels(
        self,
        owner: str,
        repo: str,
        number: int,
        labels: list[str],
    ) -> list[dict[str, Any]]:
        """Mock add_labels method."""
        self._mock._record_call(
            "issues.add_labels",
            (owner, repo, number),
            {"labels": list(labels)},
        )
        return self._get_response("add_labels", [{"name": name} for name in labels])


class MockGitHubClient:
    """
    Mock GitHub client for testing.

    Provides the same interface as GitHubClient but returns configurable
    mock responses instead of making real API calls.

    Example:
        ```python
        from branch_updater.testing import MockGitHubClient, create_mock_snapshot

        mock = MockGitHubClient()
        mock.pulls.configure_list_open(response=[create_mock_snapshot(number=7)])

        result = run(context, client=mock)

        assert mock.was_called("pulls.update_branch")
        assert mock.call_count("pulls.update_branch") == 1
        ```
    """

    def __init__(self) -> None:
        """Initialize the mock client."""
        self._calls: list[MockCall] = []

        # Initialize mock resource clients
        self.pulls = MockPullsClient(self)
        self.issues = MockIssuesClient(self)

    def _record_call(
        self,
        method: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        """Record a method call for verification."""
        self._calls.append(MockCall(method=method, args=args, kwargs=kwargs))

    def was_called(self, method: str) -> bool:
        """
        Check if a method was called.

        Args:
            method: Method name (e.g., "pulls.update_branch", "issues.add_labels")

        Returns:
            True if the method was called at least once
        """
        return any(call.method == method for call in self._calls)

    def call_count(self, method: str) -> int:
        """
        Get the number of times a method was called.

        Args:
            method: Method name (e.g., "pulls.update_branch", "issues.add_labels")

        Returns:
            Number of times the method was called
        """
        return sum(1 for call in self._calls if call.method == method)

    def get_calls(self, method: str | None = None) -> list[MockCall]:
        """
        Get recorded calls, optionally filtered by method.

        Args:
            method: Optional method name to filter by

        Returns:
            List of MockCall objects
        """
        if method is None:
            return list(self._calls)
        return [call for call in self._calls if call.method == method]

    def mutation_calls(self) -> list[MockCall]:
        """Recorded calls that would change state on GitHub."""
        return [
            call
            for call in self._calls
            if call.method in ("pulls.update_branch", "issues.add_labels")
        ]

    def reset(self) -> None:
        """Reset all recorded calls and configured responses."""
        self._calls.clear()
        self.pulls._responses.clear()
        self.issues._responses.clear()

    def close(self) -> None:
        """No-op for compatibility with real client."""
        pass

    def __enter__(self) -> "MockGitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()


__all__ = [
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
]
