"""
Builder for raw SQL queries and their positional parameters.
"""
from typing import Any

from sqlbuilder.options import make_config
from sqlbuilder.types import (
    Args,
    Option,
)


class Builder:
    """
    Minimal SQL builder.

    Query fragments are stripped of surrounding whitespace and joined with a
    single space.  Args are collected in the order they are appended.  The
    builder does not check that the number of placeholders in the query
    matches the number of args.

    A new Builder is empty and ready to use.  Call reset() to reuse it.
    """
    def __init__(self, *options: Option):
        self.config = make_config(*options)
        self._parts: list[str] = []
        self._args: Args = []

    def append(self, query: str, *args: Any) -> None:
        """
        Append query and args to builder.

        :param query: SQL fragment, leading and trailing whitespace is removed
        :param args: bind variables for placeholders in the fragment
        """
        self._append_query(query)
        self._parts.append(" ")
        self.append_args(*args)

    def append_no_space(self, query: str, *args: Any) -> None:
        """
        Append query and args to builder without a trailing space, so that
        the next fragment is joined directly.  Using this method can cause
        SQL syntax errors.

        :param query: SQL fragment, leading and trailing whitespace is removed
        :param args: bind variables for placeholders in the fragment
        """
        self._append_query(query)
        self.append_args(*args)

    def append_args(self, *args: Any) -> None:
        """Append args without changing the query."""
        if not args:
            return
        self._args.extend(args)

    def _append_query(self, query: str) -> None:
        self._parts.append(query.strip())

    def build(self) -> tuple[str, Args]:
        """
        Return the built query and args.

        :return: query with the trailing space removed, list of args
        """
        return self.query, self.args

    @property
    def query(self) -> str:
        """The built query"""
        return "".join(self._parts).removesuffix(" ")

    @property
    def args(self) -> Args:
        """The built args"""
        return list(self._args)

    def reset(self) -> None:
        """
        Clear the query and args.
        Call reset when you want to reuse the Builder.
        """
        self._parts = []
        self._args = []

    def __repr__(self):
        return f"Builder(query='{self.query}', args={self._args})"
