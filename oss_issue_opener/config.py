"""
Configuration management for OSS Issue Opener.

Loads the organizations to scan and the destination issue repository from:
1. Environment variables (OSS_ISSUE_OPENER_ORGS, OSS_ISSUE_OPENER_ISSUE_REPO)
2. .oss-issue-opener.toml (local config)
3. pyproject.toml (project-level config)
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# project_root is the parent directory of oss_issue_opener/
PROJECT_ROOT = Path(__file__).resolve().parent.parent

CONFIG_FILE_NAME = ".oss-issue-opener.toml"
CONFIG_SECTION = "oss-issue-opener"

DEFAULT_ORGANIZATIONS = [
    "unhappychoice",
    "irasutoya-tools",
    "bitflyer-tools",
    "circleci-tools",
]
DEFAULT_ISSUE_REPO = "unhappychoice/oss-issue-opener"

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_WEB_URL = "https://github.com"

# Global configuration for SSL verification
# Default: True (verify SSL certificates)
# Can be set to False by CLI --insecure flag
VERIFY_SSL = True


def load_config_file(config_path: Path) -> dict:
    """Load a TOML configuration file."""
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e


def _load_section() -> dict:
    """
    Return the [tool.oss-issue-opener] table.

    The local config file wins over pyproject.toml; the two are not merged.
    """
    for path in (PROJECT_ROOT / CONFIG_FILE_NAME, PROJECT_ROOT / "pyproject.toml"):
        if path.exists():
            section = load_config_file(path).get("tool", {}).get(CONFIG_SECTION, {})
            if section:
                return section
    return {}


def parse_repo_slug(slug: str) -> tuple[str, str]:
    """
    Split an "owner/name" repository slug.

    Args:
        slug: Repository slug such as "octocat/hello-world".

    Returns:
        Tuple of (owner, name).

    Raises:
        ValueError: If the slug is not of the form "owner/name".
    """
    parts = slug.strip().split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(f"Invalid repository slug: {slug!r} (expected 'owner/name')")
    return parts[0], parts[1]


def get_organizations() -> list[str]:
    """
    Get the organizations or users whose repositories are scanned.

    Priority:
    1. OSS_ISSUE_OPENER_ORGS environment variable (comma separated)
    2. .oss-issue-opener.toml / pyproject.toml "organizations"
    3. Default list

    Returns:
        Organization or user names, in scan order.
    """
    env_orgs = os.getenv("OSS_ISSUE_OPENER_ORGS")
    if env_orgs:
        orgs = [org.strip() for org in env_orgs.split(",") if org.strip()]
        if orgs:
            return orgs

    configured = _load_section().get("organizations")
    if configured:
        return [str(org) for org in configured]

    return list(DEFAULT_ORGANIZATIONS)


def get_issue_repo() -> str:
    """
    Get the "owner/name" repository where tracking issues are filed.

    Priority:
    1. OSS_ISSUE_OPENER_ISSUE_REPO environment variable
    2. .oss-issue-opener.toml / pyproject.toml "issue_repo"
    3. Default: unhappychoice/oss-issue-opener
    """
    env_repo = os.getenv("OSS_ISSUE_OPENER_ISSUE_REPO")
    if env_repo:
        return env_repo

    configured = _load_section().get("issue_repo")
    if configured:
        return str(configured)

    return DEFAULT_ISSUE_REPO


def get_github_token() -> str | None:
    """Return the GitHub token from GH_TOKEN, falling back to GITHUB_TOKEN."""
    return os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN")


def get_api_url() -> str:
    """GitHub REST API base URL (override for GitHub Enterprise)."""
    return os.getenv("OSS_ISSUE_OPENER_API_URL", DEFAULT_API_URL).rstrip("/")


def get_web_url() -> str:
    """GitHub web base URL used in issue bodies and compare links."""
    return os.getenv("OSS_ISSUE_OPENER_WEB_URL", DEFAULT_WEB_URL).rstrip("/")


def set_verify_ssl(verify: bool) -> None:
    """
    Set the SSL verification setting globally.

    Args:
        verify: Whether to verify SSL certificates.
    """
    global VERIFY_SSL
    VERIFY_SSL = verify


def get_verify_ssl() -> bool:
    """
    Get the current SSL verification setting.

    Returns:
        Whether SSL verification is enabled.
    """
    return VERIFY_SSL
