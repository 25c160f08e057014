"""The Table object itself."""

from typing import Callable, Iterable, Iterator, Self, Sequence

import pyarrow as pa

from ..errors import TableContractError, require
from ..mapping.mapper import ValueMapper
from .grid import FILLER, normalize_rows, transpose
from .join import JoinType, join_rows
from .reshape import chunk_rows


class Table:
    """A rectangular grid of string cells.

    Data is stored row major, so rows are cheap to access
    while columns are built scanning every row at the same offset.
    Rows and columns are addressed by position, the first one being ``0``.

    Any row or column returned by the table is a detached copy,
    modifying it never affects the table. In the same way tables
    created by :meth:`join`, :meth:`reshape_column`, :meth:`reshape_row`
    and :meth:`copy` share no storage with their sources.

    The table performs no locking: only one caller at a time
    is expected to mutate an instance, and nobody should read it
    while a mutation is in progress.

    >>> table = Table.from_rows([["Title", "Status"], ["T1", "Done"], ["T2"]])
    >>> table.num_rows, table.num_columns
    (3, 2)
    >>> table.last
    ['T2', '']
    >>> table.map.get_rows()
    [{'Title': 'T1', 'Status': 'Done'}, {'Title': 'T2', 'Status': ''}]
    """

    def __init__(self, rows: Iterable[Sequence[str]] | None = None) -> None:
        """
        :param rows: The rows of the table, if omitted an empty table is created.
                     Rows shorter than the longest one are right padded
                     with empty cells.
        """
        self._rows: list[list[str]] = normalize_rows(rows or [])
        self.map = ValueMapper(self)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> Self:
        """Create a table from a list of rows."""
        return cls(rows)

    @classmethod
    def from_columns(cls, columns: Iterable[Sequence[str]]) -> Self:
        """Create a table from a list of columns.

        Columns are transposed into rows, shorter
        columns are padded with empty cells.

        >>> Table.from_columns([["Title", "T1"], ["Status"]])
        Table([['Title', 'Status'], ['T1', '']])
        """
        return cls(transpose(columns))

    @classmethod
    def _adopt(cls, rows: list[list[str]]) -> Self:
        """Wrap rows already owned by the caller without copying them."""
        table = cls()
        table._rows = rows
        return table

    def __repr__(self) -> str:
        return f"Table({self._rows!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._rows == other._rows

    # Tables are mutable, so they can't be hashed.
    __hash__ = None

    def __iter__(self) -> Iterator[list[str]]:
        for row in self._rows:
            yield list(row)

    @property
    def num_rows(self) -> int:
        """Number of rows in the table."""
        return len(self._rows)

    @property
    def num_columns(self) -> int:
        """Number of columns in the table, ``0`` when there are no rows."""
        return len(self._rows[0]) if self._rows else 0

    @property
    def is_empty(self) -> bool:
        return not self._rows

    @property
    def is_not_empty(self) -> bool:
        return bool(self._rows)

    @property
    def first(self) -> list[str]:
        """The first row, the table must not be empty."""
        require(self.is_not_empty, "first row requested on an empty table")
        return list(self._rows[0])

    @property
    def first_or_none(self) -> list[str] | None:
        return list(self._rows[0]) if self._rows else None

    @property
    def last(self) -> list[str]:
        """The last row, the table must not be empty."""
        require(self.is_not_empty, "last row requested on an empty table")
        return list(self._rows[-1])

    @property
    def last_or_none(self) -> list[str] | None:
        return list(self._rows[-1]) if self._rows else None

    def add_row(self, row: Sequence[str]) -> None:
        """Append ``row`` as the new last row of the table.

        The row is stored as is, its length is not checked against
        :attr:`num_columns`. Use :meth:`normalize` to make the table
        rectangular again after appending rows of different length.
        """
        self._rows.append(list(row))

    def add_column(self, column: Sequence[str]) -> None:
        """Append ``column`` as the new last column of the table.

        If ``column`` has less values than the table has rows
        the remaining rows receive an empty cell,
        values in excess are ignored.
        """
        for idx, row in enumerate(self._rows):
            row.append(column[idx] if idx < len(column) else FILLER)

    def insert_row(self, index: int, row: Sequence[str]) -> None:
        """Insert ``row`` so that it becomes the row at ``index``.

        :param index: Must be between ``0`` and :attr:`num_rows` included.
        """
        require(
            0 <= index <= self.num_rows,
            f"row index {index} is out of range [0, {self.num_rows}]",
        )
        self._rows.insert(index, list(row))

    def insert_column(self, index: int, column: Sequence[str]) -> None:
        """Insert ``column`` so that it becomes the column at ``index``.

        Padding follows the same rules of :meth:`add_column`.

        :param index: Must be between ``0`` and :attr:`num_columns` included.
        """
        require(
            0 <= index <= self.num_columns,
            f"column index {index} is out of range [0, {self.num_columns}]",
        )
        for idx, row in enumerate(self._rows):
            row.insert(index, column[idx] if idx < len(column) else FILLER)

    def normalize(self) -> None:
        """Right pad every row with empty cells up to the length of the longest."""
        self._rows = normalize_rows(self._rows)

    def drop_row(self, index: int) -> None:
        """Remove the row at ``index``, does nothing if the row doesn't exist."""
        if 0 <= index < self.num_rows:
            del self._rows[index]

    def drop_column(self, index: int) -> None:
        """Remove the column at ``index``, does nothing if the column doesn't exist."""
        if 0 <= index < self.num_columns:
            for row in self._rows:
                if index < len(row):
                    del row[index]

    def drop_row_where(self, predicate: Callable[[list[str], int], bool]) -> None:
        """Remove all rows for which ``predicate(row, index)`` is true.

        ``index`` is the position the row had before any removal.
        """
        self._rows = [
            row for idx, row in enumerate(self._rows) if not predicate(list(row), idx)
        ]

    def drop_column_where(self, predicate: Callable[[list[str], int], bool]) -> None:
        """Remove all columns for which ``predicate(column, index)`` is true.

        Columns are visited from the last one to the first one,
        so that removing a column doesn't shift the index of the
        columns that still have to be checked.
        """
        for idx in reversed(range(self.num_columns)):
            if predicate(self._column(idx), idx):
                self.drop_column(idx)

    def drop_all_rows_except(self, indices: Iterable[int]) -> None:
        """Only keep the rows at ``indices``, in their original order."""
        keep = set(indices)
        self._rows = [row for idx, row in enumerate(self._rows) if idx in keep]

    def drop_all_columns_except(self, indices: Iterable[int]) -> None:
        """Only keep the columns at ``indices``, in their original order."""
        keep = set(indices)
        for idx in reversed(range(self.num_columns)):
            if idx not in keep:
                self.drop_column(idx)

    def index_of_row(self, row: Sequence[str]) -> int:
        """Index of the first row equal to ``row``, ``-1`` if there is none."""
        row = list(row)
        for idx, candidate in enumerate(self._rows):
            if candidate == row:
                return idx
        return -1

    def index_of_column(self, column: Sequence[str]) -> int:
        """Index of the first column equal to ``column``, ``-1`` if there is none."""
        column = list(column)
        for idx in range(self.num_columns):
            if self._column(idx) == column:
                return idx
        return -1

    def cell(self, row: int, column: int) -> str:
        """The value at ``row`` and ``column``, both must exist."""
        self._check_row(row)
        self._check_column(column)
        return _cell_at(self._rows[row], column)

    def get_row(self, row: int) -> list[str]:
        """A copy of the row at index ``row``."""
        return self.get_rows(from_row=row, count=1)[0]

    def get_column(self, column: int) -> list[str]:
        """A copy of the column at index ``column``."""
        return self.get_columns(from_column=column, count=1)[0]

    def get_rows(
        self,
        *,
        from_row: int = 0,
        from_column: int = 0,
        count: int = -1,
        length: int = -1,
    ) -> list[list[str]]:
        """Extract a rectangle of the table as a list of rows.

        :param from_row: Index of the first row to extract.
        :param from_column: Index of the first column to extract from each row.
        :param count: How many rows to extract, ``-1`` means up to the last row.
        :param length: How many columns to extract, ``-1`` means up to the last column.
        """
        to_row, to_column = self._bounds(from_row, from_column, count, length)
        return [
            [_cell_at(row, col) for col in range(from_column, to_column)]
            for row in self._rows[from_row:to_row]
        ]

    def get_columns(
        self,
        *,
        from_row: int = 0,
        from_column: int = 0,
        count: int = -1,
        length: int = -1,
    ) -> list[list[str]]:
        """Extract a rectangle of the table as a list of columns.

        :param from_row: Index of the first row to extract from each column.
        :param from_column: Index of the first column to extract.
        :param count: How many columns to extract, ``-1`` means up to the last column.
        :param length: How many rows to extract, ``-1`` means up to the last row.
        """
        to_row, to_column = self._bounds(from_row, from_column, length, count)
        return [
            [_cell_at(row, col) for row in self._rows[from_row:to_row]]
            for col in range(from_column, to_column)
        ]

    def join(self, other: "Table", how: JoinType | str = JoinType.LEFT) -> Self:
        """Join this table with ``other`` position by position.

        The result has as many rows as the shortest of the two tables.
        With a ``LEFT`` join each row is made of the cells of this table
        followed by the cells of ``other``, a ``RIGHT`` join puts
        the cells of ``other`` first.

        See :mod:`sheetgrid.table.join` for details.
        """
        how = JoinType(how)
        left, right = (self, other) if how is JoinType.LEFT else (other, self)
        return self._adopt(join_rows(left._rows, left.num_columns, right._rows))

    def reshape_column(
        self,
        *,
        from_row: int = 0,
        from_column: int = 0,
        count: int = -1,
        length: int = 1,
    ) -> Self:
        """Split rows into chunks of ``length`` cells, each becoming a new row.

        See :mod:`sheetgrid.table.reshape` for details.

        :param from_row: Index of the first row to reshape.
        :param from_column: Cells before this column are not part of the chunks.
        :param count: How many rows to reshape, ``-1`` means up to the last row.
        :param length: Number of columns of the reshaped table.
        """
        to_row, _ = self._bounds(from_row, from_column, count, -1)
        require(
            1 <= length <= self.num_columns,
            f"reshape length {length} is out of range [1, {self.num_columns}]",
        )
        return self._adopt(chunk_rows(self._rows[from_row:to_row], from_column, length))

    def reshape_row(
        self,
        *,
        from_row: int = 0,
        from_column: int = 0,
        count: int = 1,
        length: int = -1,
    ) -> Self:
        """Split columns into chunks of ``count`` cells, each becoming a new column.

        This is :meth:`reshape_column` with the role
        of rows and columns swapped. Swapping the arguments alone
        would still cut rows, so the table is transposed, reshaped
        with the arguments swapped, and the result transposed back.
        For the same reason the defaults are the swapped defaults of
        :meth:`reshape_column`: ``count=1`` and ``length=-1``.

        >>> Table.from_rows([["T1", "T2"], ["Done", "Todo"]]).reshape_row()
        Table([['T1', 'Done', 'T2', 'Todo']])

        :param from_row: Cells above this row are not part of the chunks.
        :param from_column: Index of the first column to reshape.
        :param count: Number of rows of the reshaped table.
        :param length: How many columns to reshape, ``-1`` means up to the last column.
        """
        reshaped = self._adopt(transpose(self._rows)).reshape_column(
            from_row=from_column,
            from_column=from_row,
            count=length,
            length=count,
        )
        return self._adopt(transpose(reshaped._rows))

    def copy(self) -> Self:
        """A deep copy of the table."""
        return self._adopt([list(row) for row in self._rows])

    def to_arrow(self) -> pa.Table:
        """Convert the table to a :class:`pyarrow.Table` of strings.

        The first row provides the column names,
        the remaining rows provide the data.
        """
        if self.num_columns == 0:
            return pa.table({})

        names = self.first
        if self.num_rows > 1:
            columns = self.get_columns(from_row=1)
        else:
            columns = [[] for _ in names]
        return pa.Table.from_arrays(
            [pa.array(column, type=pa.string()) for column in columns], names=names
        )

    def _column(self, index: int) -> list[str]:
        return [_cell_at(row, index) for row in self._rows]

    def _check_row(self, index: int) -> None:
        require(
            0 <= index < self.num_rows,
            f"row index {index} is out of range [0, {self.num_rows})",
        )

    def _check_column(self, index: int) -> None:
        require(
            0 <= index < self.num_columns,
            f"column index {index} is out of range [0, {self.num_columns})",
        )

    def _bounds(
        self, from_row: int, from_column: int, row_span: int, column_span: int
    ) -> tuple[int, int]:
        """Validate a rectangle of the table and compute its exclusive end."""
        self._check_row(from_row)
        self._check_column(from_column)
        for span in (row_span, column_span):
            if span < -1:
                raise TableContractError(f"span {span} can't be less than -1")

        to_row = self.num_rows if row_span == -1 else from_row + row_span
        to_column = self.num_columns if column_span == -1 else from_column + column_span
        require(
            to_row <= self.num_rows,
            f"row {to_row} is past the end of the table ({self.num_rows} rows)",
        )
        require(
            to_column <= self.num_columns,
            f"column {to_column} is past the end of the table ({self.num_columns} columns)",
        )
        return to_row, to_column


def _cell_at(row: list[str], index: int) -> str:
    # Rows appended with add_row can be shorter than the table,
    # their missing trailing cells read as empty.
    return row[index] if index < len(row) else FILLER
