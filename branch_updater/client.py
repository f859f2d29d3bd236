"""
branch-updater GitHub client.

Provides the interface the action uses to talk to the GitHub API.
"""

from typing import Any

from branch_updater.clients import IssuesClient, PullsClient
from branch_updater.context import ActionContext
from branch_updater.transport import DEFAULT_API_URL, HTTPTransport


class GitHubClient:
    """
    Client for the parts of the GitHub API the action uses.

    Aggregates the resource clients over one HTTP transport.

    Example:
        ```python
        from branch_updater import ActionContext, GitHubClient

        context = ActionContext.from_env()
        with GitHubClient.from_context(context) as client:
            prs = client.pulls.list_open(context.owner, context.repo)
            client.pulls.update_branch(context.owner, context.repo, prs[0].number)
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        graphql_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: GitHub token
            base_url: REST API root (default: https://api.github.com)
            graphql_url: GraphQL endpoint (default: ``{base_url}/graphql``)
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.base_url = base_url
        self.timeout = timeout

        # Create transport layer
        self._transport = HTTPTransport(
            token=token,
            base_url=base_url,
            graphql_url=graphql_url,
            timeout=timeout,
        )

        # Initialize resource clients
        self.pulls = PullsClient(self._transport)
        self.issues = IssuesClient(self._transport)

    @classmethod
    def from_context(
        cls,
        context: ActionContext,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "GitHubClient":
        """
        Create a client for the endpoints and credential of a run.

        Args:
            context: Run configuration
            timeout: Request timeout in seconds (default: 30.0)

        Returns:
            Configured GitHubClient instance
        """
        return cls(
            token=context.token,
            base_url=context.api_url,
            graphql_url=context.graphql_url,
            timeout=timeout,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
