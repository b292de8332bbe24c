"""
Ruby (gemspec / Gemfile) dependency classifier.
"""

import re
from fnmatch import fnmatch

from oss_issue_opener.dependency_classifiers.base import DependencyClassifier
from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider

GEMSPEC_GLOB = "*.gemspec"

DEV_GROUP_MARKER = re.compile(r":development|:test")


def is_production_in_gemspec(content: str, package: str) -> bool:
    """Check for an add_dependency (or add_runtime_dependency) declaration."""
    pattern = re.compile(
        rf"add_(?:runtime_)?dependency.*['\"]{re.escape(package)}['\"]"
    )
    return pattern.search(content) is not None


def is_production_in_gemfile(content: str, package: str) -> bool:
    """
    Check for a top-level `gem "<pkg>"` line not tagged for development/test.

    Only the text on the line of the package's first occurrence, up to that
    occurrence, is inspected for a :development or :test qualifier.
    """
    if not package:
        return False
    declared = re.compile(rf"^gem ['\"]{re.escape(package)}['\"]", re.MULTILINE)
    if not declared.search(content):
        return False
    before = content.partition(package)[0]
    line_prefix = before.split("\n")[-1]
    return DEV_GROUP_MARKER.search(line_prefix) is None


class RubyClassifier(DependencyClassifier):
    @property
    def ecosystem(self) -> ProjectType:
        return ProjectType.RUBY

    def manifest_files(self) -> list[str]:
        return [GEMSPEC_GLOB, "Gemfile"]

    async def is_production(
        self, vcs: BaseVCSProvider, owner: str, repo: str, package: str
    ) -> bool:
        entries = await vcs.list_root_entries(owner, repo)
        # The gemspec is named after the gem, so it is found in the root listing
        gemspec = next((name for name in entries if fnmatch(name, GEMSPEC_GLOB)), None)
        if gemspec:
            content = await vcs.get_file_text(owner, repo, gemspec)
            if is_production_in_gemspec(content, package):
                return True

        gemfile = await vcs.get_file_text(owner, repo, "Gemfile")
        return is_production_in_gemfile(gemfile, package)
