"""Configuration settings using Pydantic Settings.

Provides environment-driven defaults for the GitHub aggregator.

Usage:
    from repofacets.config import GitHubSettings

    # Load from environment variables (REPOFACETS_GITHUB_*)
    settings = GitHubSettings()
    settings.configure_logging()
    github = GitHub(project, settings.to_options())

    # Or override with explicit values
    options = GitHubSettings(mergify=False).to_options(pull_request_lint=False)
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install repofacets[config]"
    ) from e

from repofacets.github.models import GitHubOptions
from repofacets.logging import configure_logging


class GitHubSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the GitHub aggregator.

    Attributes:
        mergify: Enable Mergify.
        workflows: Enable GitHub workflows.
        pull_request_lint: Enable the pull request linter.
        projen_token_secret: Deprecated secret name for a personal access token.
        log_level: Level applied by configure_logging().

    Environment Variables:
        REPOFACETS_GITHUB_MERGIFY
        REPOFACETS_GITHUB_WORKFLOWS
        REPOFACETS_GITHUB_PULL_REQUEST_LINT
        REPOFACETS_GITHUB_PROJEN_TOKEN_SECRET
        REPOFACETS_GITHUB_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="REPOFACETS_GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mergify: bool = True
    workflows: bool = True
    pull_request_lint: bool = True
    projen_token_secret: str | None = None
    log_level: str = "WARNING"

    def configure_logging(self) -> logging.Logger:
        """Apply log_level to the repofacets logger.

        Returns:
            The configured `repofacets` logger.
        """
        return configure_logging(self.log_level)

    def to_options(self, **overrides: Any) -> GitHubOptions:
        """Build aggregator options from these settings.

        Args:
            **overrides: GitHubOptions fields taking precedence over settings,
                e.g. nested option bundles or projen_credentials.

        Returns:
            Options bundle for GitHub.
        """
        options = GitHubOptions(
            mergify=self.mergify,
            workflows=self.workflows,
            pull_request_lint=self.pull_request_lint,
            projen_token_secret=self.projen_token_secret,
        )
        return replace(options, **overrides)
