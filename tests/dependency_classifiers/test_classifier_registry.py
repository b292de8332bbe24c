"""
Tests for classifier dispatch and manifest fetching.
"""

import pytest

from oss_issue_opener.dependency_classifiers import (
    DefaultClassifier,
    get_classifier,
    is_production_dependency,
)
from oss_issue_opener.models import ProjectType


@pytest.mark.parametrize(
    "project_type", [t for t in ProjectType if t != ProjectType.UNKNOWN]
)
def test_every_ecosystem_has_a_classifier(project_type):
    classifier = get_classifier(project_type)
    assert classifier.ecosystem == project_type
    assert classifier.manifest_files()


def test_unknown_uses_default_classifier():
    assert isinstance(get_classifier(ProjectType.UNKNOWN), DefaultClassifier)


@pytest.mark.asyncio
async def test_unknown_fails_open(fake_vcs):
    assert await is_production_dependency(
        fake_vcs, "o", "r", "anything", ProjectType.UNKNOWN
    )


@pytest.mark.asyncio
async def test_missing_manifest_is_not_production(fake_vcs):
    for project_type in (ProjectType.NODE, ProjectType.RUST, ProjectType.GO):
        assert not await is_production_dependency(
            fake_vcs, "o", "r", "serde", project_type
        )


@pytest.mark.asyncio
async def test_node_reads_package_json(fake_vcs):
    fake_vcs.files[("o/r", "package.json")] = '{"dependencies": {"left-pad": "1"}}'
    assert await is_production_dependency(fake_vcs, "o", "r", "left-pad", ProjectType.NODE)


@pytest.mark.asyncio
async def test_kotlin_falls_back_to_kts(fake_vcs):
    fake_vcs.files[("o/r", "build.gradle.kts")] = 'implementation("io.ktor:ktor-client:2")'
    assert await is_production_dependency(fake_vcs, "o", "r", "ktor-client", ProjectType.KOTLIN)
    paths = [call[2] for call in fake_vcs.calls if call[0] == "get_file_text"]
    assert paths == ["build.gradle", "build.gradle.kts"]


@pytest.mark.asyncio
async def test_kotlin_prefers_groovy_build_file(fake_vcs):
    fake_vcs.files[("o/r", "build.gradle")] = "implementation 'com.google.guava:guava:33'"
    fake_vcs.files[("o/r", "build.gradle.kts")] = 'implementation("io.ktor:ktor-client:2")'
    assert await is_production_dependency(fake_vcs, "o", "r", "guava", ProjectType.KOTLIN)
    assert not await is_production_dependency(
        fake_vcs, "o", "r", "ktor-client", ProjectType.KOTLIN
    )


@pytest.mark.asyncio
async def test_ruby_prefers_gemspec(fake_vcs):
    fake_vcs.root_entries["o/r"] = ["lib", "mygem.gemspec", "Gemfile"]
    fake_vcs.files[("o/r", "mygem.gemspec")] = 'spec.add_dependency "faraday"'
    fake_vcs.files[("o/r", "Gemfile")] = 'gem "rake"\n'
    assert await is_production_dependency(fake_vcs, "o", "r", "faraday", ProjectType.RUBY)


@pytest.mark.asyncio
async def test_ruby_falls_back_to_gemfile(fake_vcs):
    fake_vcs.root_entries["o/r"] = ["mygem.gemspec", "Gemfile"]
    fake_vcs.files[("o/r", "mygem.gemspec")] = 'spec.add_development_dependency "rake"'
    fake_vcs.files[("o/r", "Gemfile")] = 'source "https://rubygems.org"\ngem "rake"\n'
    assert await is_production_dependency(fake_vcs, "o", "r", "rake", ProjectType.RUBY)


@pytest.mark.asyncio
async def test_ruby_without_gemspec(fake_vcs):
    fake_vcs.root_entries["o/r"] = ["Gemfile"]
    fake_vcs.files[("o/r", "Gemfile")] = 'gem "sinatra"\n'
    assert await is_production_dependency(fake_vcs, "o", "r", "sinatra", ProjectType.RUBY)
    assert not await is_production_dependency(fake_vcs, "o", "r", "rack", ProjectType.RUBY)


@pytest.mark.asyncio
async def test_ruby_reads_gemspec_matched_by_its_manifest_glob(fake_vcs):
    fake_vcs.root_entries["o/r"] = ["gemspec-notes.md", "other_name.gemspec"]
    fake_vcs.files[("o/r", "other_name.gemspec")] = 'spec.add_dependency "faraday"'
    assert "*.gemspec" in get_classifier(ProjectType.RUBY).manifest_files()
    assert await is_production_dependency(fake_vcs, "o", "r", "faraday", ProjectType.RUBY)
    paths = [call[2] for call in fake_vcs.calls if call[0] == "get_file_text"]
    assert paths == ["other_name.gemspec"]
