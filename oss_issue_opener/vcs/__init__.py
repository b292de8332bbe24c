"""
Hosting platform layer.

Everything the scanner and the issue filer read from or write to the hosting
platform goes through a BaseVCSProvider. GitHub (including GitHub Enterprise
through a custom API URL) is the only platform implemented.
"""

from oss_issue_opener.vcs.base import BaseVCSProvider, IssueCreationError
from oss_issue_opener.vcs.github import GitHubProvider

__all__ = [
    "BaseVCSProvider",
    "GitHubProvider",
    "IssueCreationError",
    "get_vcs_provider",
    "list_supported_platforms",
]

_PROVIDERS: dict[str, type[BaseVCSProvider]] = {
    "github": GitHubProvider,
}


def get_vcs_provider(platform: str = "github", **kwargs) -> BaseVCSProvider:
    """
    Create a provider for a platform name (case-insensitive).

    Keyword arguments go to the provider's constructor, e.g. token, api_url
    or verbose for GitHub.

    Raises:
        ValueError: If the platform is unknown or the provider has no
            credentials.
    """
    provider_class = _PROVIDERS.get(platform.lower())
    if provider_class is None:
        raise ValueError(
            f"Unsupported VCS platform: {platform}. "
            f"Supported platforms: {', '.join(list_supported_platforms())}"
        )
    return provider_class(**kwargs)


def list_supported_platforms() -> list[str]:
    return sorted(_PROVIDERS)
