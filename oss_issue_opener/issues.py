"""
Tracking issue construction and deduplicated batch filing.
"""

from collections.abc import Iterable
from typing import NamedTuple

import httpx
from rich.console import Console
from rich.markup import escape

from oss_issue_opener.config import parse_repo_slug
from oss_issue_opener.models import ISSUE_LABELS, FailedCheck, IssueType, PendingIssue
from oss_issue_opener.vcs.base import BaseVCSProvider

console = Console()


class FilingReport(NamedTuple):
    """What a filing pass did."""

    created: list[tuple[str, int]]  # (title, issue number)
    skipped: list[str]
    dry_run: list[str]


def format_failed_checks(checks: Iterable[FailedCheck]) -> str:
    return "\n".join(
        f"- [{check.name}]({check.url})" if check.url else f"- {check.name}"
        for check in checks
    )


def build_ci_failure_issue(
    repo: str, failed_checks: list[FailedCheck], web_url: str = "https://github.com"
) -> PendingIssue:
    """
    Build the tracking issue for a failing default branch.

    The title only depends on the repository so that the same unresolved
    failure maps onto the same open issue across runs.
    """
    body = (
        "CI is failing on the default branch.\n"
        "\n"
        "**Failed checks:**\n"
        f"{format_failed_checks(failed_checks)}\n"
        "\n"
        f"**Repository**: {web_url}/{repo}\n"
        f"**Actions**: {web_url}/{repo}/actions"
    )
    return PendingIssue(IssueType.CI_FAILURE, repo, f"[CI Failure] {repo}", body)


def build_pending_release_issue(
    repo: str, reasons: str, compare_url: str, web_url: str = "https://github.com"
) -> PendingIssue:
    """Build the tracking issue for unreleased changes."""
    body = (
        "Changes since last release:\n"
        "\n"
        f"{reasons}\n"
        "\n"
        f"**Diff**: {compare_url}\n"
        f"**Releases**: {web_url}/{repo}/releases"
    )
    return PendingIssue(
        IssueType.PENDING_RELEASE, repo, f"[Pending Release] {repo}", body
    )


def sort_issues(issues: Iterable[PendingIssue]) -> list[PendingIssue]:
    """Sort by issue type, then repository."""
    return sorted(issues, key=lambda issue: (issue.type.value, issue.repo))


async def fetch_existing_titles(
    vcs: BaseVCSProvider, owner: str, repo: str
) -> dict[IssueType, set[str]]:
    """Snapshot open issue titles per issue type (one query per type)."""
    existing: dict[IssueType, set[str]] = {}
    for issue_type in IssueType:
        issues = await vcs.list_open_issues_by_label(owner, repo, issue_type.value)
        existing[issue_type] = {title for title, _number in issues}
    return existing


async def ensure_labels(vcs: BaseVCSProvider, owner: str, repo: str) -> None:
    """
    Create the issue-type labels that are missing in the issue repository.

    GitHub creates unknown labels on issue creation anyway, so a failure here
    only costs the label's color and description.
    """
    present = set(await vcs.list_labels(owner, repo))
    for label in ISSUE_LABELS.values():
        if label.name in present:
            continue
        try:
            await vcs.create_label(owner, repo, label.name, label.color, label.description)
            console.print(f"  [dim]Created label '{label.name}'[/dim]")
        except httpx.HTTPError as e:
            console.print(
                f"[yellow]Warning: Could not create label '{label.name}': {e}[/yellow]"
            )


async def create_issues_in_batch(
    vcs: BaseVCSProvider,
    issue_repo: str,
    issues: Iterable[PendingIssue],
    dry_run: bool = False,
) -> FilingReport:
    """
    File tracking issues, skipping those already open.

    Issues are processed in (type, repo) order. An issue is skipped when an
    open issue with exactly the same title carries its type label, or when the
    same title was already filed (or listed in a dry run) earlier in this
    pass. The open titles are fetched once, before the first creation.

    Raises:
        IssueCreationError: If an issue could not be created. Issues created
            before the failure are kept.
    """
    owner, repo = parse_repo_slug(issue_repo)
    sorted_issues = sort_issues(issues)
    existing = await fetch_existing_titles(vcs, owner, repo)

    if not dry_run and sorted_issues:
        await ensure_labels(vcs, owner, repo)

    console.print("\n[bold]=== Creating Issues (sorted by type, then repo) ===[/bold]\n")

    report = FilingReport(created=[], skipped=[], dry_run=[])
    for issue in sorted_issues:
        titles = existing.setdefault(issue.type, set())
        if issue.title in titles:
            console.print(f"  [dim]\\[skip][/dim] {escape(issue.title)} (already exists)")
            report.skipped.append(issue.title)
            continue

        if dry_run:
            console.print(f"  [cyan]\\[dry-run][/cyan] {escape(issue.title)}")
            report.dry_run.append(issue.title)
        else:
            number = await vcs.create_issue(
                owner, repo, issue.title, issue.body, [issue.type.value]
            )
            console.print(
                f"  [green]\\[created][/green] {escape(issue.title)} (#{number})"
            )
            report.created.append((issue.title, number))
        # Candidates filed earlier in this run count as open
        titles.add(issue.title)

    return report
