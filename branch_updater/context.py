"""
Run configuration for the action.

Everything the run needs from the GitHub Actions environment is read once
into an immutable ActionContext.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from branch_updater.exceptions import ConfigurationError
from branch_updater.transport import DEFAULT_API_URL

DEFAULT_BASE_BRANCH = "main"


def get_input(name: str, env: Mapping[str, str]) -> str:
    """
    Read an action input the way the Actions runner exposes it.

    The runner uppercases the input name and keeps dashes, so ``github-token``
    arrives as ``INPUT_GITHUB-TOKEN``. The underscore spelling is accepted
    too, for shells that cannot export a dashed name.

    Args:
        name: Input name as declared in action.yml
        env: Environment mapping

    Returns:
        The stripped value, or "" when unset
    """
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    value = env.get(key)
    if value is None:
        value = env.get(key.replace("-", "_"), "")
    return value.strip()


@dataclass(frozen=True)
class ActionContext:
    """Repository coordinates, credential and API endpoints for one run."""

    token: str
    owner: str
    repo: str
    base_branch: str = DEFAULT_BASE_BRANCH
    api_url: str = DEFAULT_API_URL
    graphql_url: str | None = None

    def __repr__(self) -> str:
        return (
            f"ActionContext(owner={self.owner!r}, repo={self.repo!r}, "
            f"base_branch={self.base_branch!r}, api_url={self.api_url!r})"
        )

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ActionContext":
        """
        Create a context from environment variables.

        Environment variables:
            INPUT_GITHUB-TOKEN: Token for the GitHub API (required)
            GITHUB_REPOSITORY: Repository in ``owner/repo`` form (required)
            GITHUB_API_URL: REST API root (optional, default: https://api.github.com)
            GITHUB_GRAPHQL_URL: GraphQL endpoint (optional, default: ``{GITHUB_API_URL}/graphql``)
            INPUT_BASE-BRANCH: Base branch of the pull requests (optional, default: main)

        Args:
            env: Environment mapping (default: os.environ)

        Returns:
            Configured ActionContext

        Raises:
            ConfigurationError: If required variables are missing or malformed
        """
        if env is None:
            env = os.environ

        token = get_input("github-token", env)
        if not token:
            raise ConfigurationError("Input required and not supplied: github-token")

        repository = env.get("GITHUB_REPOSITORY", "").strip()
        if not repository:
            raise ConfigurationError("GITHUB_REPOSITORY environment variable not set")

        owner, _, repo = repository.partition("/")
        if not owner or not repo or "/" in repo:
            raise ConfigurationError(
                f"Invalid GITHUB_REPOSITORY: {repository}. Must be 'owner/repo'"
            )

        return cls(
            token=token,
            owner=owner,
            repo=repo,
            base_branch=get_input("base-branch", env) or DEFAULT_BASE_BRANCH,
            api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            graphql_url=env.get("GITHUB_GRAPHQL_URL") or None,
        )
