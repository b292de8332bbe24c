"""
Classifier registry: maps each project type to its dependency classifier.
"""

from oss_issue_opener.dependency_classifiers.base import (
    DefaultClassifier,
    DependencyClassifier,
)
from oss_issue_opener.dependency_classifiers.go import GoClassifier
from oss_issue_opener.dependency_classifiers.kotlin import KotlinClassifier
from oss_issue_opener.dependency_classifiers.node import NodeClassifier
from oss_issue_opener.dependency_classifiers.ruby import RubyClassifier
from oss_issue_opener.dependency_classifiers.rust import RustClassifier
from oss_issue_opener.dependency_classifiers.swift import SwiftClassifier
from oss_issue_opener.models import ProjectType
from oss_issue_opener.vcs.base import BaseVCSProvider

__all__ = [
    "DependencyClassifier",
    "DefaultClassifier",
    "get_classifier",
    "is_production_dependency",
]

_CLASSIFIERS: dict[ProjectType, DependencyClassifier] = {
    classifier.ecosystem: classifier
    for classifier in (
        RubyClassifier(),
        NodeClassifier(),
        RustClassifier(),
        KotlinClassifier(),
        GoClassifier(),
        SwiftClassifier(),
    )
}
_DEFAULT_CLASSIFIER = DefaultClassifier()


def get_classifier(project_type: ProjectType) -> DependencyClassifier:
    """
    Get the classifier for a project type.

    Unknown project types get the default classifier, which treats every
    package as a production dependency.
    """
    return _CLASSIFIERS.get(project_type, _DEFAULT_CLASSIFIER)


async def is_production_dependency(
    vcs: BaseVCSProvider,
    owner: str,
    repo: str,
    package: str,
    project_type: ProjectType,
) -> bool:
    """Check whether a package is a production dependency of a repository."""
    classifier = get_classifier(project_type)
    return await classifier.is_production(vcs, owner, repo, package)
