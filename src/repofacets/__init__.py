"""repofacets: composable GitHub facets for project scaffolding.

Usage:
    from repofacets import GitHub, GitHubOptions, Project

    project = Project("my-lib")
    github = GitHub(project, GitHubOptions(mergify=False))

    github.add_workflow("release")
    github.add_pull_request_template("Fixes #")

    assert GitHub.of(project) is github
    [w.name for w in github.workflows]  # ['pull-request-lint', 'release']
"""

__version__ = "0.1.0"

# Core primitives
from repofacets.core import (
    Capability,
    Component,
    component,
    find_all,
    find_singleton,
    register,
)

# GitHub facets
from repofacets.github import (
    ConflictingCredentialConfigurationError,
    Dependabot,
    DependabotOptions,
    GitHub,
    GithubApp,
    GithubCredentials,
    GitHubOptions,
    GithubWorkflow,
    Mergify,
    MergifyOptions,
    PersonalAccessToken,
    PullRequestLint,
    PullRequestLintOptions,
    PullRequestTemplate,
    from_app,
    from_personal_access_token,
)

# Project
from repofacets.project import ComponentContainer, Project

__all__ = [
    # Version
    "__version__",
    # Core
    "Capability",
    "Component",
    "component",
    "register",
    "find_singleton",
    "find_all",
    # Project
    "Project",
    "ComponentContainer",
    # GitHub
    "GitHub",
    "GitHubOptions",
    "GithubWorkflow",
    "Mergify",
    "MergifyOptions",
    "PullRequestLint",
    "PullRequestLintOptions",
    "PullRequestTemplate",
    "Dependabot",
    "DependabotOptions",
    # Credentials
    "GithubCredentials",
    "PersonalAccessToken",
    "GithubApp",
    "from_personal_access_token",
    "from_app",
    "ConflictingCredentialConfigurationError",
]
