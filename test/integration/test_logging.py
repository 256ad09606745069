"""Tests for sqlbuilder logging."""
# pylint: disable=unused-argument, missing-docstring
import io
import logging

import pytest

from sqlbuilder import (
    BulkBuilder,
    iter_bulk_queries,
    log_to_console,
)

INSERT_SQL = "INSERT INTO dest (a, b) VALUES (?)"
ROWS = [(1, 2), (3, 4), (5, 6)]

NO_OUTPUT = []
INFO = [
    'Generating bulk queries (chunk_size=2)',
    '2 rows bound (2 in total)',
    '1 rows bound (3 in total)',
    '3 rows bound in total']
INFO_AND_DEBUG = [
    'Generating bulk queries (chunk_size=2)',
    'Bulk builder created with 2 placeholders per row from:\n\n'
    'INSERT INTO dest (a, b) VALUES (?)\n',
    'Bulk builder created with 2 placeholders per row from:\n\n'
    'INSERT INTO dest (a, b) VALUES (?)\n',
    '2 rows bound (2 in total)',
    'Built bulk query for 2 rows:\n\n'
    'INSERT INTO dest (a, b) VALUES (?,?),(?,?)\n',
    'Bulk builder created with 2 placeholders per row from:\n\n'
    'INSERT INTO dest (a, b) VALUES (?)\n',
    '1 rows bound (3 in total)',
    'Built bulk query for 1 rows:\n\n'
    'INSERT INTO dest (a, b) VALUES (?,?)\n',
    '3 rows bound in total']


@pytest.mark.parametrize('level, expected', [
    (logging.DEBUG, INFO_AND_DEBUG),
    (logging.INFO, INFO),
    (logging.WARNING, NO_OUTPUT),
])
def test_logging_iter_bulk_queries(caplog, level, expected, logger):
    # Arrange
    caplog.set_level(level, logger=logger.name)

    # Act
    list(iter_bulk_queries(INSERT_SQL, ROWS, chunk_size=2))

    # Assert
    assert caplog.messages == expected


def test_log_to_console_formats_debug_messages_bare():
    # Arrange
    output = io.StringIO()
    log_to_console(level=logging.DEBUG, output=output)

    try:
        # Act
        BulkBuilder(INSERT_SQL)
    finally:
        logging.getLogger('sqlbuilder').handlers.clear()

    # Assert
    assert output.getvalue() == (
        'Bulk builder created with 2 placeholders per row from:\n\n'
        'INSERT INTO dest (a, b) VALUES (?)\n\n')


def test_log_to_console_formats_info_messages_with_function_name():
    output = io.StringIO()
    log_to_console(output=output)

    try:
        list(iter_bulk_queries(INSERT_SQL, []))
    finally:
        logging.getLogger('sqlbuilder').handlers.clear()

    lines = output.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith('iter_bulk_queries: Generating bulk queries (chunk_size=1000)')
    assert lines[1].endswith('iter_bulk_queries: 0 rows bound in total')
