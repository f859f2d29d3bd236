"""Issues resource client (labels)."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from branch_updater.transport import HTTPTransport


class IssuesClient:
    """Client for issue operations shared by pull requests."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the issues client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def add_labels(
        self,
        owner: str,
        repo: str,
        number: int,
        labels: list[str],
    ) -> list[dict[str, Any]]:
        """
        Add labels to an issue or pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Issue or pull request number
            labels: Label names to add

        Returns:
            All labels now on the issue

        Raises:
            NotFoundError: If the issue is not found
            ValidationError: If a label name is invalid
        """
        return self.transport.request(
            method="POST",
            path=f"/repos/{owner}/{repo}/issues/{number}/labels",
            body={"labels": labels},
        )
