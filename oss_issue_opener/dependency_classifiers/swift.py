"""
Swift Package Manager (Package.swift) dependency classifier.
"""

from oss_issue_opener.dependency_classifiers.base import DependencyClassifier
from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider


def is_production_in_package_swift(content: str, package: str) -> bool:
    """Coarse check: some .package( declaration exists and the name appears."""
    return ".package(" in content and bool(package) and package in content


class SwiftClassifier(DependencyClassifier):
    @property
    def ecosystem(self) -> ProjectType:
        return ProjectType.SWIFT

    def manifest_files(self) -> list[str]:
        return ["Package.swift"]

    async def is_production(
        self, vcs: BaseVCSProvider, owner: str, repo: str, package: str
    ) -> bool:
        content = await vcs.get_file_text(owner, repo, "Package.swift")
        return is_production_in_package_swift(content, package)
