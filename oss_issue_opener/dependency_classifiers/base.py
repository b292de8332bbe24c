"""
Base class for ecosystem-specific production dependency classifiers.
"""

from abc import ABC, abstractmethod

from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider


class DependencyClassifier(ABC):
    """Decides whether a package is a production (non-dev/test) dependency."""

    @property
    @abstractmethod
    def ecosystem(self) -> ProjectType:
        """Project type this classifier handles."""

    @abstractmethod
    def manifest_files(self) -> list[str]:
        """Manifest file names (or glob patterns) read by this classifier, in lookup order."""

    @abstractmethod
    async def is_production(
        self, vcs: BaseVCSProvider, owner: str, repo: str, package: str
    ) -> bool:
        """
        Check whether a package is a production dependency of a repository.

        Manifests that are missing or unreadable are treated as empty text.
        """


class DefaultClassifier(DependencyClassifier):
    """Fallback for unknown ecosystems: every package counts as production."""

    @property
    def ecosystem(self) -> ProjectType:
        return ProjectType.UNKNOWN

    def manifest_files(self) -> list[str]:
        return []

    async def is_production(
        self, vcs: BaseVCSProvider, owner: str, repo: str, package: str
    ) -> bool:
        return True
