"""
Builder for multi-row bulk insert queries.
"""
import logging
from collections.abc import (
    Iterable,
    Iterator,
)
from itertools import zip_longest
from typing import Any, Optional

from typing_extensions import Self

from sqlbuilder.builder import Builder
from sqlbuilder.exceptions import (
    SQLBuilderBindError,
    SQLBuilderTemplateError,
)
from sqlbuilder.options import make_config
from sqlbuilder.types import (
    Args,
    InputRow,
    Option,
)

logger = logging.getLogger('sqlbuilder')
CHUNKSIZE = 1000


class BulkBuilder:
    """
    Minimal SQL builder for bulk insert.

    The query template must end with the marker, "(?)" by default, e.g.
    "INSERT INTO tbl_name (a,b,c) VALUES (?)".  Each call to bind() adds one
    row of placeholders, "(?,?,?)", and its args.  The number of placeholders
    per row is one more than the number of commas before the marker.

    BulkBuilder can only be created via its constructor, which validates the
    template.  build() does not clear the bound rows and should be called
    once, after all rows are bound.
    """
    def __init__(self, query: str, *options: Option):
        """
        :param query: INSERT query template ending with the marker
        :param options: Option functions e.g. with_marker("[?]")
        :raises SQLBuilderTemplateError: if the template does not contain
                                         exactly one marker at its end
        """
        config = make_config(*options)
        query = query.strip()
        if not query.endswith(config.marker) or query.count(config.marker) != 1:
            msg = (f"Query must contain and end with only one {config.marker} "
                   f"as a marker for bulk builder.\n\n{query}\n")
            raise SQLBuilderTemplateError(msg)

        prefix = query.removesuffix(config.marker)
        self.arity = prefix.count(",") + 1
        self.placeholders = f"({','.join([config.placeholder] * self.arity)}),"
        self.row_count = 0

        self._builder = Builder(*options)
        self._builder.append(prefix)
        logger.debug("Bulk builder created with %s placeholders per row from:"
                     "\n\n%s\n", self.arity, query)

    @classmethod
    def for_table(cls, table: str, columns: Iterable[str], *options: Option) -> Self:
        """
        Create a BulkBuilder that inserts into the given columns of table.
        Identifiers are used as given; they are not quoted or validated.

        :param table: name of table
        :param columns: names of columns, in the order values will be bound
        :param options: Option functions e.g. with_paramstyle('format')
        :return: BulkBuilder
        """
        marker = make_config(*options).marker
        query = f"INSERT INTO {table} ({', '.join(columns)}) VALUES {marker}"
        return cls(query, *options)

    def bind(self, *args: Any) -> None:
        """
        Bind args for one row.  Calling with no args does nothing.

        :param args: values for each placeholder in the row
        :raises SQLBuilderBindError: if number of args does not match the
                                     number of placeholders per row
        """
        if not args:
            return
        self._check_arity(args)
        self._builder.append_no_space(self.placeholders, *args)
        self.row_count += 1

    def bind_many(self, rows: Iterable[InputRow]) -> None:
        """
        Bind args for each row.  All rows are checked before any are bound,
        so a bad row leaves the builder unchanged.

        :param rows: iterable of sequences of values
        :raises SQLBuilderBindError: if any non-empty row has the wrong length
        """
        rows = [tuple(row) for row in rows]
        for row in rows:
            if row:
                self._check_arity(row)

        for row in rows:
            self.bind(*row)

    def _check_arity(self, args: InputRow) -> None:
        if len(args) != self.arity:
            msg = (f"Number of placeholders and args is different.  "
                   f"Expected {self.arity} args per row, got {len(args)}: {args}")
            raise SQLBuilderBindError(msg)

    def build(self) -> tuple[str, Args]:
        """
        Return the built query and args.

        :return: query with the trailing comma removed, list of args
        """
        query, args = self.query, self.args
        logger.debug("Built bulk query for %s rows:\n\n%s\n", self.row_count, query)
        return query, args

    @property
    def query(self) -> str:
        """The built query"""
        return self._builder.query.removesuffix(",")

    @property
    def args(self) -> Args:
        """The built args"""
        return self._builder.args

    def __repr__(self):
        return (f"BulkBuilder(placeholders='{self.placeholders}', "
                f"arity={self.arity}, row_count={self.row_count})")


def iter_bulk_queries(
        query: str,
        rows: Iterable[InputRow],
        *options: Option,
        chunk_size: int = CHUNKSIZE
        ) -> Iterator[tuple[str, Args]]:
    """
    Return iterator of bulk insert queries and args, with up to chunk_size
    rows in each.  Drivers limit the number of parameters per statement, so
    large inserts are split into chunks.

    :param query: INSERT query template ending with the marker
    :param rows: iterable of sequences of values
    :param options: Option functions passed to each BulkBuilder
    :param chunk_size: maximum number of rows per query
    :return: generator returning (query, args) tuples
    :raises SQLBuilderTemplateError: if the template is invalid
    :raises SQLBuilderBindError: if a row has the wrong length
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    logger.info("Generating bulk queries (chunk_size=%s)", chunk_size)
    # Validate the template before consuming any rows
    BulkBuilder(query, *options)

    total = 0
    for chunk_with_nones in _chunker(rows, chunk_size):
        # Chunker pads to whole chunk with None; remove these
        chunk = [row for row in chunk_with_nones if row is not None]

        bulk_builder = BulkBuilder(query, *options)
        bulk_builder.bind_many(chunk)
        if not bulk_builder.row_count:
            continue

        total += bulk_builder.row_count
        logger.info("%s rows bound (%s in total)", bulk_builder.row_count, total)
        yield bulk_builder.build()

    logger.info("%s rows bound in total", total)


def _chunker(
        iterable: Iterable[InputRow],
        n_chunks: int,
        ) -> Iterator[tuple[Optional[InputRow], ...]]:
    """Collect data into fixed-length chunks or blocks.
    Code from recipe at https://docs.python.org/3/library/itertools.html

    :param iterable: an iterable object
    :param n_chunks: the number of values in each chunk
    :return: generator returning tuples of rows, of length n_chunks,
             where empty values are filled using None
    """
    # _chunker((A,B,C,D,E,F,G), 3) --> (A,B,C) (D,E,F) (G,None,None)
    args = [iter(iterable)] * n_chunks
    return zip_longest(*args, fillvalue=None)
