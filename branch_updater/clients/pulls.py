"""Pull requests resource client."""

from typing import TYPE_CHECKING, Any

from branch_updater.exceptions import NotFoundError, ResponseFormatError
from branch_updater.types.pulls import (
    MergeableState,
    MergeStateStatus,
    PullRequestSnapshot,
    StatusState,
)

if TYPE_CHECKING:
    from branch_updater.transport import HTTPTransport


OPEN_PULL_REQUESTS_QUERY = """
query($owner: String!, $repo: String!, $baseRefName: String!) {
  repository(owner: $owner, name: $repo) {
    pullRequests(baseRefName: $baseRefName, first: 100, states: OPEN, orderBy: { field: CREATED_AT, direction: ASC }) {
      nodes {
        id
        title
        author { login }
        labels(first: 100) { nodes { name } }
        number
        isDraft
        mergeStateStatus
        mergeable
        autoMergeRequest { enabledAt }
        statusCheckRollup { state }
      }
    }
  }
}
"""


class PullsClient:
    """Client for pull request operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the pulls client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_open(
        self,
        owner: str,
        repo: str,
        base_branch: str = "main",
    ) -> list[PullRequestSnapshot]:
        """
        List open pull requests targeting a base branch, oldest first.

        Only the first page (100 pull requests) is fetched.

        Args:
            owner: Repository owner
            repo: Repository name
            base_branch: Base ref the pull requests target (default: "main")

        Returns:
            Snapshots in creation order, as returned by the API

        Raises:
            GraphQLError: If the query is rejected
            NotFoundError: If the repository cannot be resolved
            ResponseFormatError: If the response has an unexpected shape
        """
        data = self.transport.graphql(
            OPEN_PULL_REQUESTS_QUERY,
            {"owner": owner, "repo": repo, "baseRefName": base_branch},
        )

        repository = data.get("repository")
        if repository is None:
            raise NotFoundError(
                "NOT_FOUND", f"Could not resolve to a Repository: {owner}/{repo}"
            )

        try:
            nodes = repository["pullRequests"]["nodes"]
        except (KeyError, TypeError) as e:
            raise ResponseFormatError(
                f"pullRequests.nodes missing from response: {e}"
            ) from e

        return [self._parse_snapshot(node) for node in nodes if node]

    def update_branch(self, owner: str, repo: str, number: int) -> dict[str, Any]:
        """
        Update a pull request branch with the latest upstream changes.

        GitHub merges the base branch into the head branch asynchronously and
        answers 202 Accepted.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Pull request number

        Returns:
            Response body (message and url)

        Raises:
            ValidationError: If the branch cannot be updated
            NotFoundError: If the pull request is not found
        """
        return self.transport.request(
            method="PUT",
            path=f"/repos/{owner}/{repo}/pulls/{number}/update-branch",
        )

    def _parse_snapshot(self, data: dict[str, Any]) -> PullRequestSnapshot:
        """Parse a pull request node from the GraphQL response."""
        try:
            author = data.get("author") or {}
            label_nodes = (data.get("labels") or {}).get("nodes") or []
            rollup = data.get("statusCheckRollup")

            return PullRequestSnapshot(
                id=data["id"],
                number=int(data["number"]),
                title=data.get("title") or "",
                author_login=author.get("login") or "",
                is_draft=bool(data.get("isDraft", False)),
                merge_state_status=MergeStateStatus(data["mergeStateStatus"]),
                mergeable=MergeableState(data["mergeable"]),
                has_auto_merge_enabled=data.get("autoMergeRequest") is not None,
                check_rollup_state=StatusState(rollup["state"]) if rollup else None,
                labels=frozenset(
                    label["name"] for label in label_nodes if label and label.get("name")
                ),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(
                f"Unexpected pull request node {data.get('number', '?')}: {e}"
            ) from e
