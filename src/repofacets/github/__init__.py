"""GitHub facets: the aggregator, its child components, and credential policy."""

from repofacets.github.credentials import (
    DEFAULT_TOKEN_SECRET,
    ConflictingCredentialConfigurationError,
    GithubApp,
    GithubCredentials,
    PersonalAccessToken,
    from_app,
    from_personal_access_token,
    resolve_credentials,
)
from repofacets.github.dependabot import DEPENDABOT, Dependabot
from repofacets.github.github import GITHUB, GitHub
from repofacets.github.mergify import MERGIFY, Mergify
from repofacets.github.models import (
    DependabotIgnore,
    DependabotOptions,
    DependabotScheduleInterval,
    GitHubOptions,
    MergifyOptions,
    MergifyRule,
    PullRequestLintOptions,
    SemanticTitleOptions,
    VersioningStrategy,
)
from repofacets.github.pr_template import PULL_REQUEST_TEMPLATE, PullRequestTemplate
from repofacets.github.pull_request_lint import PULL_REQUEST_LINT, PullRequestLint
from repofacets.github.workflows import WORKFLOW, GithubWorkflow

__all__ = [
    # Aggregator
    "GitHub",
    "GitHubOptions",
    # Credentials
    "GithubCredentials",
    "PersonalAccessToken",
    "GithubApp",
    "from_personal_access_token",
    "from_app",
    "resolve_credentials",
    "ConflictingCredentialConfigurationError",
    "DEFAULT_TOKEN_SECRET",
    # Children
    "GithubWorkflow",
    "Mergify",
    "MergifyOptions",
    "MergifyRule",
    "PullRequestLint",
    "PullRequestLintOptions",
    "SemanticTitleOptions",
    "PullRequestTemplate",
    "Dependabot",
    "DependabotOptions",
    "DependabotIgnore",
    "DependabotScheduleInterval",
    "VersioningStrategy",
    # Capabilities
    "GITHUB",
    "WORKFLOW",
    "MERGIFY",
    "PULL_REQUEST_LINT",
    "PULL_REQUEST_TEMPLATE",
    "DEPENDABOT",
]
