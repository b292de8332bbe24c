"""
Go modules (go.mod) dependency classifier.
"""

from oss_issue_opener.dependency_classifiers.base import DependencyClassifier
from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider


def is_production_in_go_mod(content: str, package: str) -> bool:
    """
    Coarse check: the module path appears anywhere in go.mod.

    require, exclude, replace and indirect entries are not told apart.
    """
    return bool(package) and package in content


class GoClassifier(DependencyClassifier):
    @property
    def ecosystem(self) -> ProjectType:
        return ProjectType.GO

    def manifest_files(self) -> list[str]:
        return ["go.mod"]

    async def is_production(
        self, vcs: BaseVCSProvider, owner: str, repo: str, package: str
    ) -> bool:
        content = await vcs.get_file_text(owner, repo, "go.mod")
        return is_production_in_go_mod(content, package)
