"""
Action entry point.

Fetches the open pull requests once, lets the selection pick and act on one
of them, and reports any error through the Actions failure channel.
"""

import logging
import os
import sys
from typing import TextIO

from branch_updater.client import GitHubClient
from branch_updater.context import ActionContext
from branch_updater.exceptions import ConfigurationError
from branch_updater.logging import configure_logging, get_logger, mask_sensitive_data
from branch_updater.selection import Outcome, RunResult, select_and_act
from branch_updater.types.pulls import PullRequestSnapshot

logger = get_logger()


def fetch_candidates(
    client: GitHubClient, context: ActionContext
) -> list[PullRequestSnapshot]:
    """Open pull requests against the base branch, oldest first."""
    return client.pulls.list_open(context.owner, context.repo, context.base_branch)


def escape_data(message: str) -> str:
    """Escape a workflow command message the way the Actions toolkit does."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """
    Emit an ``::error::`` workflow command for the message.

    The caller is responsible for exiting non-zero.
    """
    target = stream if stream is not None else sys.stdout
    print(f"::error::{escape_data(mask_sensitive_data(message))}", file=target)
    target.flush()


def run(context: ActionContext, client: GitHubClient | None = None) -> RunResult:
    """
    Execute one run: fetch, select, act.

    Any error raised while fetching or mutating ends the run; it is reported
    once through the failure channel and nothing else is attempted.

    Args:
        context: Run configuration
        client: GitHub client to use (default: one built from the context
            and closed afterwards)

    Returns:
        RunResult for the terminal state reached
    """
    owns_client = client is None
    if client is None:
        client = GitHubClient.from_context(context)

    try:
        candidates = fetch_candidates(client, context)
        logger.debug(
            f"Fetched {len(candidates)} open pull requests from {context.full_name}"
        )
        return select_and_act(candidates, client, context)
    except Exception as e:
        message = str(e)
        set_failed(message)
        return RunResult(Outcome.FAILED, message=message)
    finally:
        if owns_client:
            client.close()


def main() -> int:
    """Run the action from the Actions environment and return the exit code."""
    debug = os.environ.get("RUNNER_DEBUG") == "1"
    configure_logging(
        level=logging.DEBUG if debug else logging.INFO,
        http_level=logging.DEBUG if debug else logging.WARNING,
    )

    try:
        context = ActionContext.from_env()
    except ConfigurationError as e:
        set_failed(e.message)
        return 1

    result = run(context)
    return 0 if result.succeeded else 1
