"""Helpers shared by CLI commands."""

import asyncio
import functools
from collections.abc import Callable, Coroutine
from typing import Any

from rich.table import Table

from oss_issue_opener.cli_utils.constants import console
from oss_issue_opener.issues import FilingReport
from oss_issue_opener.models import CIStatusKind, ReleaseStatusKind
from oss_issue_opener.scanner import ScanReport


def syncify(func: Callable[..., Coroutine[Any, Any, Any]]) -> Callable[..., Any]:
    """Run an async Typer command in a fresh event loop."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return asyncio.run(func(*args, **kwargs))

    return wrapper


def display_summary(report: ScanReport, filing: FilingReport | None = None) -> None:
    """Print the end-of-run summary table."""
    ci_failures = sum(
        1 for r in report.results if r.ci_status.status == CIStatusKind.FAILURE
    )
    pending_releases = sum(
        1
        for r in report.results
        if r.release_status.status == ReleaseStatusKind.PENDING
    )

    table = Table(title="📊 Summary", show_header=False)
    table.add_column("Item", style="cyan")
    table.add_column("Count", justify="right", style="magenta")
    table.add_row("Total repositories", str(len(report.results)))
    table.add_row("CI failures", str(ci_failures))
    table.add_row("Pending releases", str(pending_releases))
    if filing is not None:
        table.add_row("Issues created", str(len(filing.created)))
        table.add_row("Issues skipped (already open)", str(len(filing.skipped)))
        if filing.dry_run:
            table.add_row("Issues to create (dry run)", str(len(filing.dry_run)))

    console.print()
    console.print(table)
