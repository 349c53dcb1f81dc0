"""Configuration module using Pydantic Settings.

Usage:
    from repofacets.config import GitHubSettings

    settings = GitHubSettings(mergify=False)
"""

from repofacets.config.settings import GitHubSettings

__all__ = [
    "GitHubSettings",
]
