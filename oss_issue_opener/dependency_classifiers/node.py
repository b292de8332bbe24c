"""
Node.js (package.json) dependency classifier.
"""

import json

from oss_issue_opener.dependency_classifiers.base import DependencyClassifier
from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider


def is_production_in_package_json(content: str, package: str) -> bool:
    """
    Check whether a package is listed under "dependencies".

    devDependencies, peerDependencies and friends do not count. Invalid JSON
    is treated as "not found".
    """
    if not content:
        return False
    try:
        manifest = json.loads(content)
    except json.JSONDecodeError:
        return False
    if not isinstance(manifest, dict):
        return False
    dependencies = manifest.get("dependencies") or {}
    return isinstance(dependencies, dict) and package in dependencies


class NodeClassifier(DependencyClassifier):
    @property
    def ecosystem(self) -> ProjectType:
        return ProjectType.NODE

    def manifest_files(self) -> list[str]:
        return ["package.json"]

    async def is_production(
        self, vcs: BaseVCSProvider, owner: str, repo: str, package: str
    ) -> bool:
        content = await vcs.get_file_text(owner, repo, "package.json")
        return is_production_in_package_json(content, package)
