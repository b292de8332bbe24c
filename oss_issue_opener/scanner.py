"""
Scan phase: classify every repository and collect candidate issues.

Repositories are checked one after another. Issues are only collected here;
filing happens once, after the whole scan, so that deduplication sees a
single snapshot of the open issues.
"""

from collections.abc import Iterable
from typing import NamedTuple

from rich.console import Console
from rich.markup import escape

from oss_issue_opener.checks import check_ci_status, check_pending_release
from oss_issue_opener.cli_utils.constants import (
    CI_ICONS,
    RELEASE_ICONS,
    RELEASE_LABELS,
)
from oss_issue_opener.config import parse_repo_slug
from oss_issue_opener.issues import build_ci_failure_issue, build_pending_release_issue
from oss_issue_opener.models import (
    CIStatusKind,
    PendingIssue,
    ReleaseStatusKind,
    RepoCheckResult,
)
from oss_issue_opener.project_type import detect_project_type
from oss_issue_opener.vcs.base import BaseVCSProvider

console = Console()


class ScanReport(NamedTuple):
    results: list[RepoCheckResult]
    issues: list[PendingIssue]


def _log(icon: str, message: str) -> None:
    console.print(f"  {icon} {message}")


def build_issues(result: RepoCheckResult, web_url: str) -> list[PendingIssue]:
    """Turn a repository's check result into candidate tracking issues."""
    issues = []
    if result.ci_status.status == CIStatusKind.FAILURE:
        issues.append(
            build_ci_failure_issue(result.repo, result.ci_status.failed_checks, web_url)
        )
    if result.release_status.status == ReleaseStatusKind.PENDING:
        issues.append(
            build_pending_release_issue(
                result.repo,
                result.release_status.reasons,
                result.release_status.compare_url or "",
                web_url,
            )
        )
    return issues


async def check_repo(
    vcs: BaseVCSProvider, full_name: str, verbose: bool = False
) -> tuple[RepoCheckResult, list[PendingIssue]]:
    """Check one "owner/name" repository and print its status lines."""
    owner, repo = parse_repo_slug(full_name)
    console.print(f"\n📦 [bold]{escape(repo)}[/bold]")

    project_type = await detect_project_type(vcs, owner, repo, verbose=verbose)
    _log("📋", f"Type: {project_type.value}")

    ci_status = await check_ci_status(vcs, owner, repo)
    _log(CI_ICONS[ci_status.status], f"CI: {ci_status.status.value}")
    for check in ci_status.failed_checks:
        _log("  -", escape(check.name))

    release_status = await check_pending_release(vcs, owner, repo, project_type)
    _log(
        RELEASE_ICONS[release_status.status],
        f"Release: {RELEASE_LABELS[release_status.status]}",
    )

    result = RepoCheckResult(full_name, project_type, ci_status, release_status)
    return result, build_issues(result, vcs.get_web_url())


async def scan_organizations(
    vcs: BaseVCSProvider, organizations: Iterable[str], verbose: bool = False
) -> ScanReport:
    """Check every repository of the given organizations or users, in order."""
    report = ScanReport(results=[], issues=[])

    for org in organizations:
        console.print(f"\n[bold cyan]━━━ Organization: {escape(org)} ━━━[/bold cyan]")
        repos = await vcs.list_repositories(org)
        console.print(f"  Found {len(repos)} repositories")

        for full_name in repos:
            result, issues = await check_repo(vcs, full_name, verbose=verbose)
            report.results.append(result)
            report.issues.extend(issues)

    return report
