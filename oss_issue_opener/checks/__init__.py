"""Repository checks: CI health and release drift."""

from oss_issue_opener.checks.ci_status import aggregate_signals, check_ci_status
from oss_issue_opener.checks.release import check_pending_release, parse_bump_commit

__all__ = [
    "aggregate_signals",
    "check_ci_status",
    "check_pending_release",
    "parse_bump_commit",
]
