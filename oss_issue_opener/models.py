"""
Shared types for repository checks and issue filing.
"""

from enum import Enum
from typing import NamedTuple


class ProjectType(str, Enum):
    """Ecosystem a repository belongs to, detected from its root listing."""

    RUBY = "ruby"
    NODE = "node"
    RUST = "rust"
    KOTLIN = "kotlin"
    GO = "go"
    SWIFT = "swift"
    UNKNOWN = "unknown"


class CIState(str, Enum):
    """State of a single CI signal."""

    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"
    PENDING = "pending"


class CIStatusKind(str, Enum):
    """Aggregated CI verdict for a default branch."""

    SUCCESS = "success"
    FAILURE = "failure"
    PENDING = "pending"
    NO_CI = "no-ci"
    NO_BRANCH = "no-branch"


class ReleaseStatusKind(str, Enum):
    """Release drift verdict."""

    NO_TAG = "no-tag"
    UP_TO_DATE = "up-to-date"
    PENDING = "pending"


class IssueType(str, Enum):
    """Kind of tracking issue. The value doubles as the issue label."""

    CI_FAILURE = "ci-failure"
    PENDING_RELEASE = "pending-release"


class CheckSignal(NamedTuple):
    """One CI result from either the commit status or the check-run API."""

    context: str
    state: str  # "success", "failure", "error", "pending"
    url: str | None = None


class FailedCheck(NamedTuple):
    name: str
    url: str | None = None


class CIStatus(NamedTuple):
    """Aggregated CI status; failed_checks is non-empty iff status is FAILURE."""

    status: CIStatusKind
    failed_checks: list[FailedCheck]


class ReleaseStatus(NamedTuple):
    """Release drift result. Only PENDING carries reasons and a compare URL."""

    status: ReleaseStatusKind
    reasons: str = ""
    compare_url: str | None = None

    @classmethod
    def no_tag(cls) -> "ReleaseStatus":
        return cls(ReleaseStatusKind.NO_TAG)

    @classmethod
    def up_to_date(cls) -> "ReleaseStatus":
        return cls(ReleaseStatusKind.UP_TO_DATE)

    @classmethod
    def pending(cls, reasons: str, compare_url: str) -> "ReleaseStatus":
        return cls(ReleaseStatusKind.PENDING, reasons, compare_url)


class DependencyReference(NamedTuple):
    """Package and versions parsed from a "Bump <pkg> from <a> to <b>" commit."""

    package: str
    from_version: str
    to_version: str


class CompareResult(NamedTuple):
    """Changed files and commit messages between two refs."""

    files: list[str]
    commit_messages: list[str]


class PendingIssue(NamedTuple):
    """A tracking issue waiting to be filed. The title is its identity."""

    type: IssueType
    repo: str  # "owner/name"
    title: str
    body: str


class RepoCheckResult(NamedTuple):
    """Outcome of checking one repository."""

    repo: str
    project_type: ProjectType
    ci_status: CIStatus
    release_status: ReleaseStatus


class IssueLabel(NamedTuple):
    name: str
    color: str
    description: str


ISSUE_LABELS: dict[IssueType, IssueLabel] = {
    IssueType.CI_FAILURE: IssueLabel(
        IssueType.CI_FAILURE.value, "d73a4a", "CI build is failing"
    ),
    IssueType.PENDING_RELEASE: IssueLabel(
        IssueType.PENDING_RELEASE.value,
        "0075ca",
        "Repository may need a new release",
    ),
}
