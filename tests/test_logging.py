"""Tests for logging utilities."""

import logging
from io import StringIO

from pathkit.logging import configure_logging, get_logger, set_log_level


def test_get_logger_returns_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "pathkit.test_module"


def test_get_logger_keeps_package_names():
    """Module names already under pathkit are not prefixed twice."""
    assert get_logger("pathkit.graphs.shortest").name == "pathkit.graphs.shortest"
    assert get_logger().name == "pathkit"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_set_log_level_string():
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("not-a-level")
        assert logger.level == logging.WARNING
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_captures_search_messages(cities):
    """Engine debug messages reach the configured stream."""
    from pathkit.graphs import shortest_path_heap

    stream = StringIO()
    get_logger("pathkit.graphs.shortest")
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        shortest_path_heap(cities.graph, cities.sf, cities.ny)
        shortest_path_heap(cities.graph, cities.ny, cities.sf)
    finally:
        configure_logging(level=logging.WARNING)

    output = stream.getvalue()
    assert "[DEBUG] pathkit.graphs.shortest" in output
    assert "total=2700" in output
    assert "No path" in output


def test_default_level_hides_debug(cities):
    from pathkit.graphs import shortest_path_heap

    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    shortest_path_heap(cities.graph, cities.sf, cities.ny)
    assert stream.getvalue() == ""
