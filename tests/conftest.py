"""Shared fixtures: an in-memory VCS provider."""

import pytest

from oss_issue_opener.models import CheckSignal, CompareResult
from oss_issue_opener.vcs.base import BaseVCSProvider, IssueCreationError


class FakeVCSProvider(BaseVCSProvider):
    """BaseVCSProvider backed by dictionaries, recording every write."""

    def __init__(self):
        self.repositories: dict[str, list[str]] = {}
        self.root_entries: dict[str, list[str]] = {}
        self.files: dict[tuple[str, str], str] = {}
        self.default_branches: dict[str, str] = {}
        self.statuses: dict[str, list[CheckSignal]] = {}
        self.check_runs: dict[str, list[CheckSignal]] = {}
        self.tags: dict[str, str] = {}
        self.comparisons: dict[str, CompareResult] = {}
        self.open_issues: dict[str, list[tuple[str, int]]] = {}
        self.labels: list[str] = []
        self.created_issues: list[dict] = []
        self.created_labels: list[str] = []
        self.fail_on_create: set[str] = set()
        self.calls: list[tuple] = []
        self._next_number = 1

    def get_platform_name(self) -> str:
        return "fake"

    def get_web_url(self) -> str:
        return "https://github.com"

    async def list_repositories(self, name):
        return list(self.repositories.get(name, []))

    async def list_root_entries(self, owner, repo):
        return list(self.root_entries.get(f"{owner}/{repo}", []))

    async def get_file_text(self, owner, repo, path):
        self.calls.append(("get_file_text", f"{owner}/{repo}", path))
        return self.files.get((f"{owner}/{repo}", path), "")

    async def get_default_branch(self, owner, repo):
        return self.default_branches.get(f"{owner}/{repo}")

    async def get_legacy_statuses(self, owner, repo, ref):
        return list(self.statuses.get(f"{owner}/{repo}", []))

    async def get_check_runs(self, owner, repo, ref):
        return list(self.check_runs.get(f"{owner}/{repo}", []))

    async def get_latest_tag(self, owner, repo):
        return self.tags.get(f"{owner}/{repo}")

    async def compare_refs(self, owner, repo, base, head):
        return self.comparisons.get(
            f"{owner}/{repo}", CompareResult(files=[], commit_messages=[])
        )

    async def list_open_issues_by_label(self, owner, repo, label):
        self.calls.append(("list_open_issues_by_label", f"{owner}/{repo}", label))
        return list(self.open_issues.get(label, []))

    async def create_issue(self, owner, repo, title, body, labels):
        self.calls.append(("create_issue", f"{owner}/{repo}", title))
        if title in self.fail_on_create:
            raise IssueCreationError(f"{owner}/{repo}", title)
        number = self._next_number
        self._next_number += 1
        self.created_issues.append(
            {"title": title, "body": body, "labels": labels, "number": number}
        )
        # Created issues show up as open on the next listing
        for label in labels:
            self.open_issues.setdefault(label, []).append((title, number))
        return number

    async def list_labels(self, owner, repo):
        return list(self.labels)

    async def create_label(self, owner, repo, name, color, description):
        self.created_labels.append(name)
        self.labels.append(name)


@pytest.fixture
def fake_vcs() -> FakeVCSProvider:
    return FakeVCSProvider()
