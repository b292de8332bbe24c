"""CI status aggregation across commit statuses and check runs."""

import asyncio
import re
from collections.abc import Iterable

from oss_issue_opener.models import (
    CheckSignal,
    CIState,
    CIStatus,
    CIStatusKind,
    FailedCheck,
)
from oss_issue_opener.vcs.base import BaseVCSProvider

# Coverage reporters are not build-health signals
COVERAGE_CONTEXT = re.compile(r"codecov", re.IGNORECASE)

FAILED_STATES = (CIState.FAILURE.value, CIState.ERROR.value)


def is_coverage_signal(context: str) -> bool:
    return COVERAGE_CONTEXT.search(context) is not None


def aggregate_signals(signals: Iterable[CheckSignal]) -> CIStatus:
    """
    Merge CI signals into one verdict.

    Coverage signals are dropped first. Then:
    - nothing left: NO_CI
    - any failure/error: FAILURE, with every failed signal in input order
    - any pending: PENDING
    - otherwise: SUCCESS
    """
    relevant = [s for s in signals if not is_coverage_signal(s.context)]
    if not relevant:
        return CIStatus(CIStatusKind.NO_CI, [])

    failed = [FailedCheck(s.context, s.url) for s in relevant if s.state in FAILED_STATES]
    if failed:
        return CIStatus(CIStatusKind.FAILURE, failed)

    if any(s.state == CIState.PENDING.value for s in relevant):
        return CIStatus(CIStatusKind.PENDING, [])

    return CIStatus(CIStatusKind.SUCCESS, [])


async def check_ci_status(vcs: BaseVCSProvider, owner: str, repo: str) -> CIStatus:
    """Check the CI status of a repository's default branch."""
    default_branch = await vcs.get_default_branch(owner, repo)
    if not default_branch:
        return CIStatus(CIStatusKind.NO_BRANCH, [])

    statuses, check_runs = await asyncio.gather(
        vcs.get_legacy_statuses(owner, repo, default_branch),
        vcs.get_check_runs(owner, repo, default_branch),
    )
    return aggregate_signals([*statuses, *check_runs])
