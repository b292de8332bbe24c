"""
Release drift analysis.

Compares the latest release tag with the default branch and decides whether
the changes since the tag are worth a release: source changes under the
ecosystem's source tree, or bumps of production dependencies.
"""

import asyncio
import re
from collections.abc import Iterable

from oss_issue_opener.dependency_classifiers import is_production_dependency
from oss_issue_opener.models import DependencyReference, ProjectType, ReleaseStatus
from oss_issue_opener.project_type import get_source_pattern
from oss_issue_opener.vcs.base import BaseVCSProvider

BUMP_PATTERN = re.compile(r"^Bump ([^ ]+) from ([^ ]+) to ([^ ]+)")

MAX_LISTED_FILES = 5


def parse_bump_commit(message: str) -> DependencyReference | None:
    """
    Parse a "Bump <pkg> from <from> to <to>" commit message.

    Returns:
        DependencyReference, or None if the message is not a bump commit.
    """
    subject = message.split("\n", 1)[0]
    match = BUMP_PATTERN.match(subject)
    if not match:
        return None
    package, from_version, to_version = match.groups()
    return DependencyReference(package, from_version, to_version)


def format_source_changes(files: Iterable[str], project_type: ProjectType) -> list[str]:
    """Build the "Source code changes" section, or [] when no source changed."""
    pattern = get_source_pattern(project_type)
    changed = [f for f in files if pattern.search(f)]
    if not changed:
        return []

    lines = ["**Source code changes:**"]
    lines.extend(f"- `{path}`" for path in changed[:MAX_LISTED_FILES])
    if len(changed) > MAX_LISTED_FILES:
        lines.append(f"- ... and {len(changed) - MAX_LISTED_FILES} more files")
    lines.append("")
    return lines


def format_dependency_updates(references: Iterable[DependencyReference]) -> list[str]:
    """Build the "Dependency updates" section, or [] when there are none."""
    entries = [
        f"- {ref.package} {ref.from_version} -> {ref.to_version}" for ref in references
    ]
    if not entries:
        return []
    return ["**Dependency updates:**", *entries]


async def collect_production_bumps(
    vcs: BaseVCSProvider,
    owner: str,
    repo: str,
    commit_messages: Iterable[str],
    project_type: ProjectType,
) -> list[DependencyReference]:
    """
    Return the bump commits that touch production dependencies.

    Each bump is classified independently and concurrently; the result keeps
    commit order.
    """
    references = [
        ref for ref in (parse_bump_commit(m) for m in commit_messages) if ref
    ]
    verdicts = await asyncio.gather(
        *(
            is_production_dependency(vcs, owner, repo, ref.package, project_type)
            for ref in references
        )
    )
    return [ref for ref, is_production in zip(references, verdicts) if is_production]


def build_compare_url(web_url: str, owner: str, repo: str, base: str, head: str) -> str:
    return f"{web_url}/{owner}/{repo}/compare/{base}...{head}"


async def check_pending_release(
    vcs: BaseVCSProvider, owner: str, repo: str, project_type: ProjectType
) -> ReleaseStatus:
    """
    Check whether a repository has unreleased, release-worthy changes.

    Returns:
        no-tag when the repository has neither releases nor tags; up-to-date
        when there is no default branch or nothing relevant changed since the
        tag; otherwise pending with the reasons and a compare link.
    """
    latest_tag = await vcs.get_latest_tag(owner, repo)
    if not latest_tag:
        return ReleaseStatus.no_tag()

    default_branch = await vcs.get_default_branch(owner, repo)
    if not default_branch:
        return ReleaseStatus.up_to_date()

    diff = await vcs.compare_refs(owner, repo, latest_tag, default_branch)
    if not diff.files and not diff.commit_messages:
        return ReleaseStatus.up_to_date()

    reasons = format_source_changes(diff.files, project_type)
    bumps = await collect_production_bumps(
        vcs, owner, repo, diff.commit_messages, project_type
    )
    reasons.extend(format_dependency_updates(bumps))

    if not reasons:
        return ReleaseStatus.up_to_date()

    compare_url = build_compare_url(
        vcs.get_web_url(), owner, repo, latest_tag, default_branch
    )
    return ReleaseStatus.pending("\n".join(reasons), compare_url)
