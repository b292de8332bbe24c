"""Shared console and status icons for command output."""

from rich.console import Console

from oss_issue_opener.models import CIStatusKind, ReleaseStatusKind

console = Console()

CI_ICONS: dict[CIStatusKind, str] = {
    CIStatusKind.SUCCESS: "✅",
    CIStatusKind.FAILURE: "❌",
    CIStatusKind.PENDING: "⏳",
    CIStatusKind.NO_CI: "⚪",
    CIStatusKind.NO_BRANCH: "⚪",
}

RELEASE_ICONS: dict[ReleaseStatusKind, str] = {
    ReleaseStatusKind.NO_TAG: "⚪",
    ReleaseStatusKind.UP_TO_DATE: "✅",
    ReleaseStatusKind.PENDING: "📦",
}

RELEASE_LABELS: dict[ReleaseStatusKind, str] = {
    ReleaseStatusKind.NO_TAG: "no tags found",
    ReleaseStatusKind.UP_TO_DATE: "up to date",
    ReleaseStatusKind.PENDING: "pending",
}
