"""Tests for JSON logging configuration."""

import io
import json
import logging

import pytest

from repofacets import GitHub, GitHubOptions
from repofacets.logging import LOGGER_NAME, JsonFormatter, configure_logging


@pytest.fixture
def package_logger():
    """Yield the repofacets logger and restore its state afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_configure_logging_replaces_handlers(package_logger):
    configure_logging("debug")
    configured = configure_logging("info")

    assert configured is package_logger
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)
    assert package_logger.level == logging.INFO
    assert package_logger.propagate is False


def test_root_logger_untouched(package_logger):
    root = logging.getLogger()
    before = list(root.handlers)

    configure_logging("debug")

    assert root.handlers == before


def test_project_name_is_a_top_level_field(package_logger, project, facet_cls):
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    project.add_component(facet_cls(project))

    line = json.loads(stream.getvalue().splitlines()[-1])
    assert line["project"] == "test-project"
    assert line["level"] == "debug"
    assert line["logger"] == "repofacets.project.local"
    assert line["event"] == "Added FixtureFacet"


def test_formatter_omits_missing_context():
    record = logging.LogRecord("repofacets.test", logging.INFO, __file__, 1, "hi %s", ("x",), None)

    line = json.loads(JsonFormatter().format(record))

    assert line["event"] == "hi x"
    assert "project" not in line


def test_aggregator_commit_is_logged(project, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        GitHub(project, GitHubOptions(pull_request_lint=False))

    assert "GitHub facets registered: GitHub, Mergify" in caplog.text
