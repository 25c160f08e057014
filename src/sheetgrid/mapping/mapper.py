"""Header based lookups and dictionary views over a Table."""

from typing import TYPE_CHECKING, Sequence

from ..errors import require

if TYPE_CHECKING:
    from ..table import Table


class ValueMapper:
    """Query a table through its header row or header column.

    The mapper never modifies the table it is bound to,
    it only reads it, so any change to the table is immediately
    reflected by the mapper.

    Lookups accept a ``schema`` index, which is the row or column
    holding the keys to search for. By default it is the first one.

    >>> from sheetgrid.table import Table
    >>> table = Table.from_rows([
    ...     ["Title", "Status"],
    ...     ["Task 1", "Accepted"],
    ...     ["Task 2", "Rejected"],
    ... ])
    >>> table.map.find_in_column("Title", "Task 2")
    2
    >>> table.map.find_in_row("Task 1", "Accepted")
    1
    """

    def __init__(self, table: "Table") -> None:
        """
        :param table: The table to read data from.
        """
        self._table = table

    def __repr__(self) -> str:
        return f"ValueMapper({self._table!r})"

    def index_of_row(self, key: str, schema: int = 0) -> int:
        """Index of the first row whose cell in column ``schema`` is ``key``.

        Returns ``-1`` if no such row exists.
        """
        require(
            0 <= schema < self._table.num_columns,
            f"schema column {schema} is out of range [0, {self._table.num_columns})",
        )
        return _index(self._table.get_column(schema), key)

    def index_of_column(self, key: str, schema: int = 0) -> int:
        """Index of the first column whose cell in row ``schema`` is ``key``.

        Returns ``-1`` if no such column exists.
        """
        require(
            0 <= schema < self._table.num_rows,
            f"schema row {schema} is out of range [0, {self._table.num_rows})",
        )
        return _index(self._table.get_row(schema), key)

    def find_in_row(self, row: str, value: str, schema: int = 0) -> int:
        """Index of the first column holding ``value`` in the row identified by ``row``.

        The row is located through :meth:`index_of_row`,
        then its cells are scanned skipping the ``schema`` column.
        Returns ``-1`` if either the row or the value are not found.
        """
        row_index = self.index_of_row(row, schema=schema)
        if row_index == -1:
            return -1

        for idx, cell in enumerate(self._table.get_row(row_index)):
            if idx != schema and cell == value:
                return idx
        return -1

    def find_in_column(self, column: str, value: str, schema: int = 0) -> int:
        """Index of the first row holding ``value`` in the column identified by ``column``.

        The column is located through :meth:`index_of_column`,
        then its cells are scanned skipping the ``schema`` row.
        Returns ``-1`` if either the column or the value are not found.
        """
        column_index = self.index_of_column(column, schema=schema)
        if column_index == -1:
            return -1

        for idx, cell in enumerate(self._table.get_column(column_index)):
            if idx != schema and cell == value:
                return idx
        return -1

    def get_rows(
        self,
        *,
        from_row: int = 1,
        from_column: int = 0,
        count: int = -1,
        length: int = -1,
        alias: Sequence[str] | None = None,
    ) -> list[dict[str, str]]:
        """Extract rows of the table as dictionaries.

        Rows are selected like :meth:`sheetgrid.table.Table.get_rows` does,
        but by default the first row is skipped as it's the header.

        :param alias: The keys of the dictionaries, one for each extracted column.
                      When omitted the cells of the first row are used.
        """
        if self._table.is_empty:
            return []

        rows = self._table.get_rows(
            from_row=from_row, from_column=from_column, count=count, length=length
        )
        width = self._table.num_columns - from_column if length == -1 else length
        if alias is None:
            alias = self._table.first[from_column : from_column + width]
        return _to_dicts(alias, rows, width)

    def get_columns(
        self,
        *,
        from_row: int = 0,
        from_column: int = 1,
        count: int = -1,
        length: int = -1,
        alias: Sequence[str] | None = None,
    ) -> list[dict[str, str]]:
        """Extract columns of the table as dictionaries.

        Columns are selected like :meth:`sheetgrid.table.Table.get_columns` does,
        but by default the first column is skipped as it's the header.

        :param alias: The keys of the dictionaries, one for each extracted row.
                      When omitted the cells of the first column are used.
        """
        if self._table.is_empty:
            return []

        columns = self._table.get_columns(
            from_row=from_row, from_column=from_column, count=count, length=length
        )
        height = self._table.num_rows - from_row if length == -1 else length
        if alias is None:
            alias = self._table.get_column(0)[from_row : from_row + height]
        return _to_dicts(alias, columns, height)


def _index(values: list[str], key: str) -> int:
    try:
        return values.index(key)
    except ValueError:
        return -1


def _to_dicts(
    alias: Sequence[str], records: list[list[str]], size: int
) -> list[dict[str, str]]:
    require(
        len(alias) == size,
        f"alias has {len(alias)} keys, but {size} values were extracted",
    )
    return [dict(zip(alias, record)) for record in records]
