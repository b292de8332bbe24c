"""
Kotlin/Gradle dependency classifier.
"""

import re

from oss_issue_opener.dependency_classifiers.base import DependencyClassifier
from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider

PRODUCTION_CONFIGURATION = re.compile(r"""(implementation|api)\s*[("']""")


def is_production_in_gradle(content: str, package: str) -> bool:
    """
    Coarse check: the build file declares some implementation/api dependency
    and mentions the package anywhere.

    The package is not bound to the declaration it appears in, so a name in a
    comment or a testImplementation line also matches.
    """
    return (
        PRODUCTION_CONFIGURATION.search(content) is not None and package in content
    )


class KotlinClassifier(DependencyClassifier):
    @property
    def ecosystem(self) -> ProjectType:
        return ProjectType.KOTLIN

    def manifest_files(self) -> list[str]:
        return ["build.gradle", "build.gradle.kts"]

    async def is_production(
        self, vcs: BaseVCSProvider, owner: str, repo: str, package: str
    ) -> bool:
        content = ""
        for manifest in self.manifest_files():
            content = await vcs.get_file_text(owner, repo, manifest)
            if content:
                break
        return is_production_in_gradle(content, package)
