"""
Pull request selection.

Picks the one open pull request to move toward merge and carries out the
single action for it: ask Renovate to rebase its PR by labelling it, or
merge the base branch into anyone else's PR.
"""

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from branch_updater.logging import get_logger
from branch_updater.types.pulls import (
    MergeableState,
    MergeStateStatus,
    PullRequestSnapshot,
    StatusState,
)

if TYPE_CHECKING:
    from branch_updater.client import GitHubClient
    from branch_updater.context import ActionContext

logger = get_logger()

RENOVATE_LOGIN = "renovate"
REBASE_LABEL = "rebase"

MSG_NO_CANDIDATES = "No PRs to update"
MSG_WAITING = "There is a PR that is following the base branch and CI is running"
MSG_REBASE = "Rebase Renovate PR: {number}"
MSG_ALREADY_REBASING = "This PR is already rebasing by Renovate"
MSG_UPDATE_BRANCH = "Update branch of PR: {number}"


class Outcome(str, enum.Enum):
    """Terminal state of a run."""

    NO_CANDIDATES = "no_candidates"
    WAITING = "waiting"
    LABEL_ALREADY_SET = "label_already_set"
    LABELED = "labeled"
    BRANCH_UPDATED = "branch_updated"
    FAILED = "failed"


@dataclass(frozen=True)
class Decision:
    """What a run should do, before any API call is made."""

    outcome: Outcome
    target: PullRequestSnapshot | None = None


@dataclass(frozen=True)
class RunResult:
    """Result of a run."""

    outcome: Outcome
    pull_request_number: int | None = None
    message: str | None = None

    @property
    def succeeded(self) -> bool:
        """Every outcome except FAILED ends the run successfully."""
        return self.outcome is not Outcome.FAILED


def is_renovate(pr: PullRequestSnapshot) -> bool:
    return pr.author_login == RENOVATE_LOGIN


def is_eligible(pr: PullRequestSnapshot) -> bool:
    """
    Check whether a pull request may be acted on.

    A pull request qualifies when auto-merge is enabled, it is mergeable
    (Renovate PRs may also be conflicting, a rebase resolves that), its
    checks have not failed and it is not a draft.
    """
    mergeable = pr.mergeable is MergeableState.MERGEABLE or (
        is_renovate(pr) and pr.mergeable is MergeableState.CONFLICTING
    )
    return (
        pr.has_auto_merge_enabled
        and mergeable
        and pr.check_rollup_state is not StatusState.FAILURE
        and not pr.is_draft
    )


def is_ci_running_on_fresh_branch(pr: PullRequestSnapshot) -> bool:
    """Checks are still running on a head that already contains the base."""
    return (
        pr.check_rollup_state is StatusState.PENDING
        and pr.merge_state_status is not MergeStateStatus.BEHIND
    )


def plan(candidates: Sequence[PullRequestSnapshot]) -> Decision:
    """
    Decide what to do with the fetched pull requests without calling the API.

    Args:
        candidates: Open pull requests, oldest first

    Returns:
        Decision naming the outcome and, for actions, the target pull request
    """
    eligible = [pr for pr in candidates if is_eligible(pr)]
    logger.debug(f"{len(eligible)} of {len(candidates)} pull requests are eligible")

    if not eligible:
        return Decision(Outcome.NO_CANDIDATES)

    # Any eligible PR with CI in flight pauses the run, not only the target.
    if any(is_ci_running_on_fresh_branch(pr) for pr in eligible):
        return Decision(Outcome.WAITING)

    target = next((pr for pr in eligible if not is_renovate(pr)), eligible[0])

    if not is_renovate(target):
        return Decision(Outcome.BRANCH_UPDATED, target)

    if target.has_label(REBASE_LABEL):
        return Decision(Outcome.LABEL_ALREADY_SET, target)

    return Decision(Outcome.LABELED, target)


def select_and_act(
    candidates: Sequence[PullRequestSnapshot],
    client: "GitHubClient",
    context: "ActionContext",
) -> RunResult:
    """
    Pick the target pull request and make at most one mutating call for it.

    Args:
        candidates: Open pull requests, oldest first
        client: GitHub client used for the mutation
        context: Repository coordinates

    Returns:
        RunResult with the outcome reached

    Raises:
        BranchUpdaterError: If the mutation fails
    """
    decision = plan(candidates)

    if decision.outcome is Outcome.NO_CANDIDATES:
        logger.info(MSG_NO_CANDIDATES)
        return RunResult(Outcome.NO_CANDIDATES, message=MSG_NO_CANDIDATES)

    if decision.outcome is Outcome.WAITING:
        logger.info(MSG_WAITING)
        return RunResult(Outcome.WAITING, message=MSG_WAITING)

    target = decision.target
    assert target is not None

    if decision.outcome is Outcome.BRANCH_UPDATED:
        message = MSG_UPDATE_BRANCH.format(number=target.number)
        logger.info(message)
        client.pulls.update_branch(context.owner, context.repo, target.number)
        return RunResult(Outcome.BRANCH_UPDATED, target.number, message)

    message = MSG_REBASE.format(number=target.number)
    logger.info(message)

    if decision.outcome is Outcome.LABEL_ALREADY_SET:
        logger.info(MSG_ALREADY_REBASING)
        return RunResult(Outcome.LABEL_ALREADY_SET, target.number, MSG_ALREADY_REBASING)

    client.issues.add_labels(context.owner, context.repo, target.number, [REBASE_LABEL])
    return RunResult(Outcome.LABELED, target.number, message)
