"""
Base VCS provider interface.

Every read method is fail-soft: implementations return the documented
empty/absent value instead of raising on network or API errors. Only the
write methods (issue and label creation) raise.
"""

from abc import ABC, abstractmethod

from oss_issue_opener.models import CheckSignal, CompareResult


class IssueCreationError(RuntimeError):
    """Raised when a tracking issue could not be created."""

    def __init__(self, repo: str, title: str, cause: Exception | None = None):
        self.repo = repo
        self.title = title
        self.cause = cause
        message = f"Failed to create issue '{title}' in {repo}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class BaseVCSProvider(ABC):
    """Abstract interface for the hosting platform the scanner talks to."""

    @abstractmethod
    def get_platform_name(self) -> str:
        """Return the platform identifier (e.g. 'github')."""

    @abstractmethod
    def get_web_url(self) -> str:
        """Return the web base URL used for links in issue bodies."""

    @abstractmethod
    async def list_repositories(self, name: str) -> list[str]:
        """List "owner/name" slugs of non-archived public repositories."""

    @abstractmethod
    async def list_root_entries(self, owner: str, repo: str) -> list[str]:
        """List file and directory names at the repository root."""

    @abstractmethod
    async def get_file_text(self, owner: str, repo: str, path: str) -> str:
        """Return a file's text, or "" if missing or unreadable."""

    @abstractmethod
    async def get_default_branch(self, owner: str, repo: str) -> str | None:
        """Return the default branch name, or None."""

    @abstractmethod
    async def get_legacy_statuses(
        self, owner: str, repo: str, ref: str
    ) -> list[CheckSignal]:
        """Return commit statuses for a ref."""

    @abstractmethod
    async def get_check_runs(self, owner: str, repo: str, ref: str) -> list[CheckSignal]:
        """Return check runs for a ref, already mapped to signal states."""

    @abstractmethod
    async def get_latest_tag(self, owner: str, repo: str) -> str | None:
        """Return the latest release tag, falling back to the newest tag."""

    @abstractmethod
    async def compare_refs(
        self, owner: str, repo: str, base: str, head: str
    ) -> CompareResult:
        """Return changed files and commit messages between two refs."""

    @abstractmethod
    async def list_open_issues_by_label(
        self, owner: str, repo: str, label: str
    ) -> list[tuple[str, int]]:
        """Return (title, number) of open issues carrying a label."""

    @abstractmethod
    async def create_issue(
        self, owner: str, repo: str, title: str, body: str, labels: list[str]
    ) -> int:
        """Create an issue and return its number. Raises IssueCreationError."""

    @abstractmethod
    async def list_labels(self, owner: str, repo: str) -> list[str]:
        """Return the label names defined in a repository."""

    @abstractmethod
    async def create_label(
        self, owner: str, repo: str, name: str, color: str, description: str
    ) -> None:
        """Create a label in a repository."""
