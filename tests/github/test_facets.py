"""Tests for the child facets built by the GitHub aggregator."""

import pytest

from repofacets import GitHub, GitHubOptions
from repofacets.github import (
    DependabotIgnore,
    DependabotOptions,
    MergifyRule,
    PullRequestLint,
    PullRequestLintOptions,
    SemanticTitleOptions,
    VersioningStrategy,
)


def _lint(project):
    return next(c for c in project.components if isinstance(c, PullRequestLint))


def test_pull_request_lint_workflow(project):
    github = GitHub(project)
    lint = _lint(project)

    assert lint.workflow is github.try_find_workflow("pull-request-lint")
    assert "pull_request_target" in lint.workflow.triggers
    step = lint.workflow.jobs["validate"]["steps"][0]
    assert step["with"] == {"types": "feat\nfix\nchore", "requireScope": False}


def test_pull_request_lint_custom_types(project):
    options = PullRequestLintOptions(
        semantic_title_options=SemanticTitleOptions(types=("feat", "docs"), require_scope=True)
    )

    GitHub(project, GitHubOptions(pull_request_lint_options=options))

    step = _lint(project).workflow.jobs["validate"]["steps"][0]
    assert step["with"] == {"types": "feat\ndocs", "requireScope": True}


def test_pull_request_lint_without_semantic_title(project):
    options = PullRequestLintOptions(semantic_title=False)

    github = GitHub(project, GitHubOptions(pull_request_lint_options=options))

    assert _lint(project).workflow is None
    assert github.workflows == []


def test_workflow_jobs_and_triggers(bare_github):
    workflow = bare_github.add_workflow("build")

    workflow.on(push={"branches": ["main"]})
    workflow.add_jobs({"test": {"runs-on": "ubuntu-latest"}, "lint": {"runs-on": "ubuntu-latest"}})

    assert workflow.triggers == {"push": {"branches": ["main"]}}
    assert list(workflow.jobs) == ["test", "lint"]


def test_workflow_duplicate_job_rejected(bare_github):
    workflow = bare_github.add_workflow("build")
    workflow.add_job("test", {})

    with pytest.raises(ValueError, match="already has a job"):
        workflow.add_job("test", {})


def test_workflow_empty_name_rejected(bare_github):
    with pytest.raises(ValueError, match="must not be empty"):
        bare_github.add_workflow("")


def test_mergify_add_rule(project):
    github = GitHub(project)
    rule = MergifyRule(name="label", conditions=("label=ready",), actions={"merge": {}})

    assert github.mergify is not None
    github.mergify.add_rule(rule)

    assert github.mergify.rules == [rule]


def test_dependabot_ignores_projen_by_default(bare_github):
    dependabot = bare_github.add_dependabot()

    assert dependabot.ignore == (DependabotIgnore("projen"),)
    assert dependabot.versioning_strategy is VersioningStrategy.LOCKFILE_ONLY


def test_dependabot_ignore_entries(bare_github):
    options = DependabotOptions(
        ignore_projen=False,
        ignore=(DependabotIgnore("left-pad", ("1.x",)),),
        labels=("deps",),
    )

    dependabot = bare_github.add_dependabot(options)
    dependabot.add_ignore("lodash")

    assert dependabot.ignore == (
        DependabotIgnore("left-pad", ("1.x",)),
        DependabotIgnore("lodash"),
    )
    assert dependabot.labels == ("deps",)


def test_pull_request_template_copies_lines(bare_github):
    template = bare_github.add_pull_request_template("a", "b")

    template.lines.append("c")

    assert template.lines == ["a", "b"]


def test_pull_request_template_rejects_non_strings(bare_github, project):
    before = len(project)

    with pytest.raises(TypeError, match="must be str"):
        bare_github.add_pull_request_template("ok", 3)  # type: ignore[arg-type]

    assert len(project) == before
