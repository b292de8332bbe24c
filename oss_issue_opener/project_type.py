"""
Project type detection from a repository's root listing.
"""

import re
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape

from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider

console = Console()

# First matching rule wins, so the order here is significant.
PROJECT_PATTERNS: list[tuple[re.Pattern[str], ProjectType]] = [
    (re.compile(r"^Cargo\.toml$"), ProjectType.RUST),
    (re.compile(r"^package\.json$"), ProjectType.NODE),
    (re.compile(r"\.gemspec$"), ProjectType.RUBY),
    (re.compile(r"^build\.gradle(\.kts)?$"), ProjectType.KOTLIN),
    (re.compile(r"^go\.mod$"), ProjectType.GO),
    (re.compile(r"^Package\.swift$"), ProjectType.SWIFT),
]

# Paths whose changes count as release-relevant source changes
SOURCE_PATTERNS: dict[ProjectType, re.Pattern[str]] = {
    ProjectType.RUBY: re.compile(r"^lib/"),
    ProjectType.NODE: re.compile(r"^(src|lib)/"),
    ProjectType.RUST: re.compile(r"^src/"),
    ProjectType.KOTLIN: re.compile(r"^(src|app/src)/"),
    ProjectType.GO: re.compile(r"\.go$"),
    ProjectType.SWIFT: re.compile(r"^Sources/"),
    ProjectType.UNKNOWN: re.compile(r"^src/"),
}


def find_project_manifest(
    entries: Iterable[str],
) -> tuple[ProjectType, str | None]:
    """
    Classify a repository from its root file and directory names.

    Args:
        entries: Names at the repository root.

    Returns:
        The type of the first rule in PROJECT_PATTERNS matching any entry,
        with the first entry it matched; (ProjectType.UNKNOWN, None) when no
        rule matches.
    """
    names = list(entries)
    for pattern, project_type in PROJECT_PATTERNS:
        for name in names:
            if pattern.search(name):
                return project_type, name
    return ProjectType.UNKNOWN, None


def detect_project_type_from_entries(entries: Iterable[str]) -> ProjectType:
    project_type, _manifest = find_project_manifest(entries)
    return project_type


async def detect_project_type(
    vcs: BaseVCSProvider, owner: str, repo: str, verbose: bool = False
) -> ProjectType:
    """
    Fetch the root listing and classify it. A failed listing gives UNKNOWN.

    With verbose, print which root entry decided the type.
    """
    entries = await vcs.list_root_entries(owner, repo)
    project_type, manifest = find_project_manifest(entries)
    if verbose:
        if manifest:
            console.print(
                f"    [dim]Note: {project_type.value} project, found {escape(manifest)}[/dim]"
            )
        else:
            console.print("    [dim]Note: no known project manifest at the root[/dim]")
    return project_type


def get_source_pattern(project_type: ProjectType) -> re.Pattern[str]:
    return SOURCE_PATTERNS[project_type]
