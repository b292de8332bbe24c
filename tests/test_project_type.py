"""
Tests for project type detection.
"""

import pytest

from oss_issue_opener.models import ProjectType
from oss_issue_opener.project_type import (
    PROJECT_PATTERNS,
    detect_project_type,
    detect_project_type_from_entries,
    find_project_manifest,
    get_source_pattern,
)


@pytest.mark.parametrize(
    "entries,expected",
    [
        (["Cargo.toml", "src"], ProjectType.RUST),
        (["package.json", "README.md"], ProjectType.NODE),
        (["mygem.gemspec", "Gemfile", "lib"], ProjectType.RUBY),
        (["build.gradle"], ProjectType.KOTLIN),
        (["build.gradle.kts", "settings.gradle.kts"], ProjectType.KOTLIN),
        (["go.mod", "go.sum", "main.go"], ProjectType.GO),
        (["Package.swift", "Sources"], ProjectType.SWIFT),
        (["README.md", "Makefile"], ProjectType.UNKNOWN),
        ([], ProjectType.UNKNOWN),
    ],
)
def test_detect_project_type_from_entries(entries, expected):
    assert detect_project_type_from_entries(entries) == expected


def test_first_rule_wins_regardless_of_listing_order():
    assert detect_project_type_from_entries(["package.json", "Cargo.toml"]) == (
        ProjectType.RUST
    )


def test_gemfile_alone_is_not_ruby():
    assert detect_project_type_from_entries(["Gemfile"]) == ProjectType.UNKNOWN


def test_rule_order():
    assert [t for _pattern, t in PROJECT_PATTERNS] == [
        ProjectType.RUST,
        ProjectType.NODE,
        ProjectType.RUBY,
        ProjectType.KOTLIN,
        ProjectType.GO,
        ProjectType.SWIFT,
    ]


def test_patterns_match_whole_names():
    assert detect_project_type_from_entries(["my-package.json"]) == ProjectType.UNKNOWN


@pytest.mark.asyncio
async def test_detect_project_type_uses_root_listing(fake_vcs):
    fake_vcs.root_entries["o/r"] = ["go.mod"]
    assert await detect_project_type(fake_vcs, "o", "r") == ProjectType.GO


@pytest.mark.asyncio
async def test_failed_listing_is_unknown(fake_vcs):
    assert await detect_project_type(fake_vcs, "o", "missing") == ProjectType.UNKNOWN


def test_find_project_manifest_reports_deciding_entry():
    assert find_project_manifest(["README.md", "app.gemspec", "go.mod"]) == (
        ProjectType.RUBY,
        "app.gemspec",
    )
    assert find_project_manifest(["README.md"]) == (ProjectType.UNKNOWN, None)


@pytest.mark.asyncio
async def test_verbose_detection_prints_manifest(fake_vcs, capsys):
    fake_vcs.root_entries["o/r"] = ["README.md", "Cargo.toml"]
    await detect_project_type(fake_vcs, "o", "r", verbose=True)
    assert "rust project, found Cargo.toml" in capsys.readouterr().out

    await detect_project_type(fake_vcs, "o", "r")
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_verbose_detection_without_manifest(fake_vcs, capsys):
    await detect_project_type(fake_vcs, "o", "empty", verbose=True)
    assert "no known project manifest" in capsys.readouterr().out


@pytest.mark.parametrize(
    "project_type,path,expected",
    [
        (ProjectType.RUBY, "lib/gem.rb", True),
        (ProjectType.RUBY, "spec/gem_spec.rb", False),
        (ProjectType.NODE, "src/index.ts", True),
        (ProjectType.NODE, "lib/index.js", True),
        (ProjectType.NODE, "test/index.test.ts", False),
        (ProjectType.RUST, "src/main.rs", True),
        (ProjectType.KOTLIN, "app/src/main/kotlin/App.kt", True),
        (ProjectType.GO, "internal/pkg/file.go", True),
        (ProjectType.GO, "go.sum", False),
        (ProjectType.SWIFT, "Sources/Tool/main.swift", True),
        (ProjectType.SWIFT, "Tests/ToolTests/x.swift", False),
        (ProjectType.UNKNOWN, "src/anything", True),
    ],
)
def test_source_patterns(project_type, path, expected):
    assert bool(get_source_pattern(project_type).search(path)) is expected
