"""
GitHub VCS provider implementation for OSS Issue Opener.

This module implements the GitHub-specific VCS provider using the GitHub REST API
to list repositories, read their contents and CI results, and file issues.
"""

import base64
from typing import Any
from urllib.parse import quote

import httpx
from rich.console import Console

from oss_issue_opener.config import get_api_url, get_github_token, get_web_url
from oss_issue_opener.http_client import _get_async_http_client
from oss_issue_opener.models import CheckSignal, CIState, CompareResult
from oss_issue_opener.vcs.base import BaseVCSProvider, IssueCreationError

console = Console()

PER_PAGE = 100

# Errors that mean "no data" for read calls, including bodies of an
# unexpected shape
READ_ERRORS = (
    httpx.HTTPError,
    ValueError,
    KeyError,
    TypeError,
    AttributeError,
)


def conclusion_to_state(status: str | None, conclusion: str | None) -> str:
    """
    Map a check run's status/conclusion pair onto a commit-status state.

    A run that has not completed is pending. A completed run is a success only
    on a "success" conclusion and a failure on "failure" or "timed_out"; any
    other conclusion (neutral, skipped, cancelled, ...) counts as pending.
    """
    if status != "completed":
        return CIState.PENDING.value
    if conclusion == "success":
        return CIState.SUCCESS.value
    if conclusion in ("failure", "timed_out"):
        return CIState.FAILURE.value
    return CIState.PENDING.value


class GitHubProvider(BaseVCSProvider):
    """GitHub VCS provider using the REST API."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str | None = None,
        web_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        verbose: bool = False,
    ):
        """
        Initialize GitHub provider.

        Args:
            token: GitHub Personal Access Token. If not provided, reads from
                   GH_TOKEN or GITHUB_TOKEN environment variables.
            api_url: REST API base URL. Defaults to https://api.github.com.
            web_url: Web base URL for links. Defaults to https://github.com.
            client: HTTP client to use instead of the shared pooled client.
            verbose: Print a note whenever a read falls back to an empty value.

        Raises:
            ValueError: If no token is provided and neither env var is set
        """
        self.token = token or get_github_token()
        if not self.token:
            raise ValueError(
                "GH_TOKEN is not set.\n"
                "\n"
                "To get started:\n"
                "1. Create a GitHub Personal Access Token:\n"
                "   → https://github.com/settings/tokens/new\n"
                "2. Select scope: 'repo' (or 'public_repo' for public repositories)\n"
                "3. Set the token:\n"
                "   export GH_TOKEN='your_token_here'  # Linux/macOS\n"
                "   or add to your .env file: GH_TOKEN=your_token_here\n"
            )
        self.api_url = (api_url or get_api_url()).rstrip("/")
        self.web_url = (web_url or get_web_url()).rstrip("/")
        self._client = client
        self.verbose = verbose

    def get_platform_name(self) -> str:
        """Return 'github' as the platform identifier."""
        return "github"

    def get_web_url(self) -> str:
        return self.web_url

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await _get_async_http_client()

    async def _request(
        self,
        method: str,
        path_or_url: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Send a request to the REST API.

        Raises:
            httpx.HTTPStatusError: If the API returns an error status
            httpx.RequestError: On transport failures
        """
        url = (
            path_or_url
            if path_or_url.startswith("http")
            else f"{self.api_url}{path_or_url}"
        )
        client = await self._get_client()
        response = await client.request(
            method, url, params=params, json=json, headers=self._headers()
        )
        response.raise_for_status()
        return response

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        response = await self._request("GET", path, params=params)
        return response.json()

    async def _get_paginated(
        self, path: str, params: dict[str, Any] | None = None
    ) -> list[Any]:
        """Collect all pages of a list endpoint by following 'next' links."""
        items: list[Any] = []
        response = await self._request(
            "GET", path, params={**(params or {}), "per_page": PER_PAGE}
        )
        items.extend(response.json())
        next_url = response.links.get("next", {}).get("url")
        while next_url:
            response = await self._request("GET", next_url)
            items.extend(response.json())
            next_url = response.links.get("next", {}).get("url")
        return items

    def _note(self, message: str) -> None:
        if self.verbose:
            console.print(f"[dim]Note: {message}[/dim]")

    @staticmethod
    def _repo_path(owner: str, repo: str) -> str:
        return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

    async def list_repositories(self, name: str) -> list[str]:
        """
        List repositories of an organization or a user.

        Archived repositories are skipped. For a user account only public
        repositories owned by the user are returned.
        """
        try:
            account = await self._get_json(f"/users/{quote(name, safe='')}")
            if account.get("type") == "Organization":
                repos = await self._get_paginated(
                    f"/orgs/{quote(name, safe='')}/repos", {"type": "public"}
                )
                return [r["full_name"] for r in repos if not r.get("archived")]

            repos = await self._get_paginated(
                f"/users/{quote(name, safe='')}/repos", {"type": "owner"}
            )
            return [
                r["full_name"]
                for r in repos
                if not r.get("archived") and not r.get("private")
            ]
        except READ_ERRORS as e:
            console.print(f"[yellow]Warning: Could not list repositories of {name}: {e}[/yellow]")
            return []

    async def list_root_entries(self, owner: str, repo: str) -> list[str]:
        try:
            data = await self._get_json(f"{self._repo_path(owner, repo)}/contents")
            if not isinstance(data, list):
                return []
            return [entry["name"] for entry in data if "name" in entry]
        except READ_ERRORS as e:
            self._note(f"root listing of {owner}/{repo} unavailable ({e})")
            return []

    async def get_file_text(self, owner: str, repo: str, path: str) -> str:
        try:
            data = await self._get_json(
                f"{self._repo_path(owner, repo)}/contents/{quote(path)}"
            )
            if not isinstance(data, dict) or not data.get("content"):
                return ""
            return base64.b64decode(data["content"]).decode("utf-8")
        except (*READ_ERRORS, UnicodeDecodeError) as e:
            self._note(f"{path} of {owner}/{repo} unavailable ({e})")
            return ""

    async def get_default_branch(self, owner: str, repo: str) -> str | None:
        try:
            data = await self._get_json(self._repo_path(owner, repo))
            return data.get("default_branch") or None
        except READ_ERRORS as e:
            self._note(f"default branch of {owner}/{repo} unavailable ({e})")
            return None

    async def get_legacy_statuses(
        self, owner: str, repo: str, ref: str
    ) -> list[CheckSignal]:
        try:
            data = await self._get_json(
                f"{self._repo_path(owner, repo)}/commits/{quote(ref)}/status"
            )
            return [
                CheckSignal(
                    context=status.get("context") or "",
                    state=status.get("state") or "",
                    url=status.get("target_url"),
                )
                for status in data.get("statuses", [])
            ]
        except READ_ERRORS as e:
            self._note(f"commit statuses of {owner}/{repo} unavailable ({e})")
            return []

    async def get_check_runs(self, owner: str, repo: str, ref: str) -> list[CheckSignal]:
        try:
            data = await self._get_json(
                f"{self._repo_path(owner, repo)}/commits/{quote(ref)}/check-runs",
                {"per_page": PER_PAGE},
            )
            return [
                CheckSignal(
                    context=run.get("name") or "",
                    state=conclusion_to_state(run.get("status"), run.get("conclusion")),
                    url=run.get("html_url"),
                )
                for run in data.get("check_runs", [])
            ]
        except READ_ERRORS as e:
            self._note(f"check runs of {owner}/{repo} unavailable ({e})")
            return []

    async def get_latest_tag(self, owner: str, repo: str) -> str | None:
        """Return the latest release's tag, else the most recent tag."""
        try:
            data = await self._get_json(f"{self._repo_path(owner, repo)}/releases/latest")
            tag = data.get("tag_name")
            if tag:
                return tag
        except READ_ERRORS:
            pass

        try:
            tags = await self._get_json(
                f"{self._repo_path(owner, repo)}/tags", {"per_page": 1}
            )
            if isinstance(tags, list) and tags:
                return tags[0].get("name")
            return None
        except READ_ERRORS as e:
            self._note(f"tags of {owner}/{repo} unavailable ({e})")
            return None

    async def compare_refs(
        self, owner: str, repo: str, base: str, head: str
    ) -> CompareResult:
        try:
            data = await self._get_json(
                f"{self._repo_path(owner, repo)}/compare/{quote(base)}...{quote(head)}"
            )
            return CompareResult(
                files=[f["filename"] for f in data.get("files") or []],
                commit_messages=[
                    c["commit"]["message"] for c in data.get("commits") or []
                ],
            )
        except READ_ERRORS as e:
            self._note(f"compare {base}...{head} of {owner}/{repo} unavailable ({e})")
            return CompareResult(files=[], commit_messages=[])

    async def list_open_issues_by_label(
        self, owner: str, repo: str, label: str
    ) -> list[tuple[str, int]]:
        try:
            items = await self._get_paginated(
                f"{self._repo_path(owner, repo)}/issues",
                {"labels": label, "state": "open"},
            )
            # The issues endpoint also returns pull requests
            return [
                (item["title"], item["number"])
                for item in items
                if "pull_request" not in item
            ]
        except READ_ERRORS as e:
            console.print(
                f"[yellow]Warning: Could not list open '{label}' issues: {e}[/yellow]"
            )
            return []

    async def create_issue(
        self, owner: str, repo: str, title: str, body: str, labels: list[str]
    ) -> int:
        try:
            response = await self._request(
                "POST",
                f"{self._repo_path(owner, repo)}/issues",
                json={"title": title, "body": body, "labels": labels},
            )
            return response.json()["number"]
        except READ_ERRORS as e:
            raise IssueCreationError(f"{owner}/{repo}", title, e) from e

    async def list_labels(self, owner: str, repo: str) -> list[str]:
        try:
            labels = await self._get_paginated(f"{self._repo_path(owner, repo)}/labels")
            return [label["name"] for label in labels]
        except READ_ERRORS as e:
            self._note(f"labels of {owner}/{repo} unavailable ({e})")
            return []

    async def create_label(
        self, owner: str, repo: str, name: str, color: str, description: str
    ) -> None:
        await self._request(
            "POST",
            f"{self._repo_path(owner, repo)}/labels",
            json={"name": name, "color": color, "description": description},
        )

