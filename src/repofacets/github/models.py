"""Option bundles for the GitHub facets.

All options are immutable. Every field has a default, so an empty bundle
configures a facet entirely by its own defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from repofacets.github.credentials import GithubCredentials


class DependabotScheduleInterval(Enum):
    """How often dependabot checks for updates."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class VersioningStrategy(Enum):
    """How dependabot edits version constraints."""

    LOCKFILE_ONLY = "lockfile-only"  # Only update lock files, ignore manifests
    AUTO = "auto"
    WIDEN = "widen"
    INCREASE = "increase"
    INCREASE_IF_NECESSARY = "increase-if-necessary"


@dataclass(frozen=True, slots=True)
class DependabotIgnore:
    """Dependency (optionally restricted to versions) dependabot leaves alone."""

    dependency_name: str
    versions: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DependabotOptions:
    """Options for Dependabot.

    Attributes:
        schedule_interval: How often to check for updates.
        versioning_strategy: How to update version constraints.
        ignore: Dependencies to skip.
        ignore_projen: Skip updates to projen itself.
        labels: Labels applied to dependabot pull requests.
    """

    schedule_interval: DependabotScheduleInterval = DependabotScheduleInterval.DAILY
    versioning_strategy: VersioningStrategy = VersioningStrategy.LOCKFILE_ONLY
    ignore: tuple[DependabotIgnore, ...] = ()
    ignore_projen: bool = True
    labels: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class MergifyRule:
    """A pull request rule: when every condition holds, run the actions."""

    name: str
    conditions: tuple[str, ...]
    actions: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class MergifyOptions:
    """Options for Mergify."""

    rules: tuple[MergifyRule, ...] = ()


@dataclass(frozen=True, slots=True)
class SemanticTitleOptions:
    """Conventional Commits checks applied to pull request titles."""

    types: tuple[str, ...] = ("feat", "fix", "chore")
    require_scope: bool = False


@dataclass(frozen=True, slots=True)
class PullRequestLintOptions:
    """Options for the pull request linter."""

    semantic_title: bool = True
    semantic_title_options: SemanticTitleOptions = field(default_factory=SemanticTitleOptions)


@dataclass(frozen=True, slots=True)
class GitHubOptions:
    """Options for the GitHub aggregator.

    Attributes:
        mergify: Enable Mergify on the repository.
        mergify_options: Options passed to Mergify.
        workflows: Enable GitHub workflows. Consumers decide whether to
            materialize workflows from this flag; adding workflows is never
            blocked by it.
        pull_request_lint: Add basic pull request checks, like validating
            that titles follow Conventional Commits.
        pull_request_lint_options: Options passed to the pull request linter.
        projen_credentials: How workflows authenticate to the GitHub API.
            Defaults to a personal access token named PROJEN_GITHUB_TOKEN.
        projen_token_secret: Deprecated. Name of a secret holding a personal
            access token. Use projen_credentials instead.
    """

    mergify: bool = True
    mergify_options: MergifyOptions | None = None
    workflows: bool = True
    pull_request_lint: bool = True
    pull_request_lint_options: PullRequestLintOptions | None = None
    projen_credentials: GithubCredentials | None = None
    projen_token_secret: str | None = None
