"""
Fixtures for pytest.  Functions defined here can be passed as arguments to
pytest tests.  scope parameter describes how often they are recreated e.g.
once per module.
"""
import datetime as dt
import logging
import sqlite3
from textwrap import dedent

import pytest

from sqlbuilder import log_to_console


@pytest.fixture(scope="function")
def logger() -> logging.Logger:
    """
    Return an enabled sqlbuilder logger for tests.
    The logger handlers are cleared afterwards.
    """
    log_to_console()
    logger = logging.getLogger("sqlbuilder")
    yield logger
    logger.handlers.clear()


@pytest.fixture(scope='module')
def test_table_data():
    """
    Return list of tuples of test data
    """
    data = [
        (1, 1.234, 'text', 'Öæ°\nz', dt.date(2018, 12, 7).isoformat()),
        (2, 2.234, 'text', 'Öæ°\nz', dt.date(2018, 12, 8).isoformat()),
        (3, 2.234, None, 'Öæ°\nz', dt.date(2018, 12, 9).isoformat()),
    ]
    return data


@pytest.fixture(scope='function')
def sqlite_conn():
    """
    Return connection to in-memory SQLite database with empty 'dest' table.
    The connection is closed after the test.
    """
    create_sql = dedent("""
          CREATE TABLE dest
            (
              id integer primary key,
              value float not null,
              simple_text text,
              utf8_text text,
              day text
            )
            ;""").strip()

    conn = sqlite3.connect(':memory:')
    conn.execute(create_sql)
    conn.commit()

    # Return control to calling function until end of test
    yield conn

    conn.close()
