"""
Rust (Cargo.toml) dependency classifier.
"""

import re

from oss_issue_opener.dependency_classifiers.base import DependencyClassifier
from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider

# Text between the [dependencies] header and the next section (or EOF)
DEPENDENCIES_SECTION = re.compile(r"\[dependencies\]([\s\S]*?)(?=\[|\Z)")


def is_production_in_cargo_toml(content: str, package: str) -> bool:
    """
    Check whether a package is declared in the [dependencies] section.

    [dev-dependencies] and [build-dependencies] are ignored. The section ends
    at the next "[", so inline tables that contain brackets end it early.
    """
    match = DEPENDENCIES_SECTION.search(content)
    if not match:
        return False
    pattern = re.compile(rf"^{re.escape(package)}\s*=", re.MULTILINE)
    return pattern.search(match.group(1)) is not None


class RustClassifier(DependencyClassifier):
    @property
    def ecosystem(self) -> ProjectType:
        return ProjectType.RUST

    def manifest_files(self) -> list[str]:
        return ["Cargo.toml"]

    async def is_production(
        self, vcs: BaseVCSProvider, owner: str, repo: str, package: str
    ) -> bool:
        content = await vcs.get_file_text(owner, repo, "Cargo.toml")
        return is_production_in_cargo_toml(content, package)
