"""
Tests for structured logging configuration
"""

import json
import logging
import sys

import pytest

from bookshelf.logging import (
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    resolve_log_level,
    set_request_context,
)


def test_request_id_format():
    request_id = generate_request_id()

    assert len(request_id) == 14
    assert "=" not in request_id
    assert generate_request_id() != request_id


def test_set_and_clear_request_context():
    set_request_context(request_id="req-123")
    assert get_request_id() == "req-123"

    clear_request_context()
    assert get_request_id() is None


def test_set_request_context_generates_id():
    request_id = set_request_context()

    assert request_id
    assert get_request_id() == request_id
    clear_request_context()


def test_json_logging_includes_request_id(capsys):
    configure_logging(debug=False)
    logger = get_logger("bookshelf.tests")

    set_request_context(request_id="req-456")
    try:
        logger.info("Catalog loaded", books=6)
    finally:
        clear_request_context()

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "Catalog loaded"
    assert event["books"] == 6
    assert event["request_id"] == "req-456"
    assert event["level"] == "info"


def test_operation_name_is_attached(capsys):
    configure_logging(debug=False)
    logger = get_logger("bookshelf.tests")

    set_request_context(request_id="req-789", graphql_operation="AuthorById")
    try:
        logger.debug("Author not found", author_id="42")
        logger.info("Resolved author", author_id="2")
    finally:
        clear_request_context()

    lines = capsys.readouterr().out.strip().splitlines()
    event = json.loads(lines[-1])
    assert event["graphql_operation"] == "AuthorById"
    # DEBUG is filtered at the default INFO level
    assert all("Author not found" not in line for line in lines)


def test_logs_to_given_stream(capsys):
    configure_logging(stream=sys.stderr)
    get_logger("bookshelf.tests").warning("Catalog integrity issues found")

    captured = capsys.readouterr()
    assert "Catalog integrity issues found" in captured.err
    assert "Catalog integrity issues found" not in captured.out


@pytest.mark.parametrize(
    ("debug", "log_level", "expected"),
    [
        (True, "error", logging.DEBUG),
        (False, "warning", logging.WARNING),
        (False, "ERROR", logging.ERROR),
        (False, None, logging.INFO),
        (False, "bogus", logging.INFO),
    ],
)
def test_resolve_log_level(debug, log_level, expected):
    assert resolve_log_level(debug, log_level) == expected


def test_configure_logging_sets_root_level():
    configure_logging(log_level="error")

    assert logging.getLogger().level == logging.ERROR
