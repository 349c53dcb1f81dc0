"""Wire GitHub facets onto a project and look them up again.

Run with: python examples/github_project.py
"""

from repofacets import GitHub, GitHubOptions, Project, from_app
from repofacets.github import DependabotOptions, DependabotScheduleInterval
from repofacets.logging import configure_logging


def main() -> None:
    configure_logging("info")

    project = Project("example-lib")
    GitHub(project, GitHubOptions(projen_credentials=from_app()))

    # Later, from code that only has the project
    github = GitHub.of(project)
    assert github is not None

    build = github.add_workflow("build")
    build.on(push={"branches": ["main"]}, pull_request={})
    build.add_job(
        "test",
        {
            "runs-on": "ubuntu-latest",
            "steps": [
                *github.projen_credentials.setup_steps(),
                {"run": "make test", "env": {"GH_TOKEN": github.projen_credentials.token_ref}},
            ],
        },
    )
    github.add_workflow("release")
    github.add_dependabot(DependabotOptions(schedule_interval=DependabotScheduleInterval.WEEKLY))
    github.add_pull_request_template("Fixes #", "", "## Checklist", "- [ ] Tests")

    print("Workflows:", [w.name for w in github.workflows])
    print("Components:", [type(c).__name__ for c in project.components])


if __name__ == "__main__":
    main()
