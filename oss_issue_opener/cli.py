"""
Command-line interface for OSS Issue Opener.
"""

import typer
from rich.markup import escape

from oss_issue_opener.cli_utils.constants import console
from oss_issue_opener.cli_utils.helpers import display_summary, syncify
from oss_issue_opener.config import (
    get_issue_repo,
    get_organizations,
    parse_repo_slug,
    set_verify_ssl,
)
from oss_issue_opener.http_client import close_async_http_client
from oss_issue_opener.issues import create_issues_in_batch
from oss_issue_opener.scanner import check_repo, scan_organizations
from oss_issue_opener.vcs import BaseVCSProvider, IssueCreationError, get_vcs_provider

# --- Typer App ---
app = typer.Typer(
    help="Scan repositories for failing CI and pending releases, and file tracking issues."
)


def _init_provider(verbose: bool) -> BaseVCSProvider:
    """Create the GitHub provider or exit when no token is configured."""
    try:
        vcs = get_vcs_provider("github", verbose=verbose)
    except ValueError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    console.print("✅ GitHub authentication initialized")
    return vcs


@app.command("scan")
@syncify
async def scan(
    orgs: list[str] | None = typer.Option(
        None,
        "--org",
        "-o",
        help="Organization or user to scan (repeatable). Defaults to the configured list.",
    ),
    issue_repo: str | None = typer.Option(
        None,
        "--issue-repo",
        help="Repository (owner/name) where tracking issues are filed.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Report the issues that would be created without creating them.",
    ),
    insecure: bool = typer.Option(
        False,
        "--insecure",
        help="Disable SSL certificate verification for HTTPS requests.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show diagnostic notes (detected project manifest, reads that fell back to empty results).",
    ),
) -> None:
    """
    Scan all repositories, then file deduplicated tracking issues.

    Example:
        oss-issue-opener scan
        oss-issue-opener scan --org my-org --issue-repo me/tracker --dry-run
    """
    set_verify_ssl(not insecure)

    try:
        organizations = orgs or get_organizations()
        target_repo = issue_repo or get_issue_repo()
        parse_repo_slug(target_repo)
    except ValueError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    vcs = _init_provider(verbose)

    filing = None
    try:
        report = await scan_organizations(vcs, organizations, verbose=verbose)
        if report.issues:
            filing = await create_issues_in_batch(
                vcs, target_repo, report.issues, dry_run=dry_run
            )
    except IssueCreationError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        await close_async_http_client()

    display_summary(report, filing)


@app.command("check")
@syncify
async def check(
    repository: str = typer.Argument(..., help="Repository to check (owner/name)."),
    insecure: bool = typer.Option(
        False,
        "--insecure",
        help="Disable SSL certificate verification for HTTPS requests.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show diagnostic notes (detected project manifest, reads that fell back to empty results).",
    ),
) -> None:
    """
    Check a single repository and show the issues it would produce.

    Nothing is filed.

    Example:
        oss-issue-opener check octocat/hello-world
    """
    set_verify_ssl(not insecure)

    try:
        parse_repo_slug(repository)
    except ValueError as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    vcs = _init_provider(verbose)
    try:
        _result, issues = await check_repo(vcs, repository, verbose=verbose)
    finally:
        await close_async_http_client()

    if not issues:
        console.print("\n[green]No tracking issues needed.[/green]")
        return

    for issue in issues:
        console.print(f"\n[bold]{escape(issue.title)}[/bold] [dim]({issue.type.value})[/dim]")
        console.print(escape(issue.body))


if __name__ == "__main__":
    app()
