"""Sources of rows to build tables from.

The table engine only deals with rows of strings, it doesn't care
where they come from. A data source is in charge of fetching the rows
from somewhere and converting every value to a string.

Data sources rely on Apache Arrow to read files, but unlike
Arrow they never infer types: a cell containing ``08`` stays ``"08"``
and empty cells become empty strings instead of nulls.

>>> import pyarrow as pa
>>> data = pa.table({"Title": ["Task 1", "Task 2"], "Points": [3, None]})
>>> ArrowRowSource(data).rows()
[['Title', 'Points'], ['Task 1', '3'], ['Task 2', '']]
"""

import abc
import logging

import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.csv

from .table import FILLER, Table

logger = logging.getLogger(__name__)


class RowSource(abc.ABC):
    """Base class for objects providing rows to a table."""

    @abc.abstractmethod
    def rows(self) -> list[list[str]]:
        """Fetch the rows, each row being a list of strings."""
        ...

    def table(self) -> Table:
        """Fetch the rows and build a :class:`sheetgrid.table.Table` out of them."""
        return Table.from_rows(self.rows())


class ArrowRowSource(RowSource):
    """Provide rows from an in-memory pyarrow.Table or pyarrow.RecordBatch.

    Every column is cast to string, nulls become empty strings.
    """

    def __init__(
        self, data: pa.Table | pa.RecordBatch, include_header: bool = True
    ) -> None:
        """
        :param data: The table or recordbatch with the data to read.
        :param include_header: Emit the column names as the first row.
        """
        self.data = data
        self.include_header = include_header

    def __str__(self) -> str:
        return f"ArrowRowSource(columns={self.data.column_names}, rows={self.data.num_rows})"

    def rows(self) -> list[list[str]]:
        columns = self._string_columns()
        rows = [list(row) for row in zip(*columns)]
        if self.include_header:
            rows.insert(0, list(self.data.column_names))
        logger.debug("Read %d rows from %s", len(rows), self)
        return rows

    def table(self) -> Table:
        # Arrow data is column major, so skip the round trip through rows.
        columns = self._string_columns()
        if self.include_header:
            columns = [
                [name] + column for name, column in zip(self.data.column_names, columns)
            ]
        return Table.from_columns(columns)

    def _string_columns(self) -> list[list[str]]:
        return [
            pc.fill_null(pc.cast(column, pa.string()), FILLER).to_pylist()
            for column in self.data.columns
        ]


class CSVRowSource(RowSource):
    """Provide rows from a CSV file.

    The file is read as is: the first line is emitted as
    the first row, no matter if it's a header or not.
    """

    def __init__(self, filename: str, block_size: int | None = None) -> None:
        """
        :param filename: The path of the local CSV file.
        :param block_size: How many bytes to process at a time while reading.
        """
        self.filename = filename
        self.block_size = block_size

    def __str__(self) -> str:
        return f"CSVRowSource({self.filename}, block_size={self.block_size})"

    def rows(self) -> list[list[str]]:
        read_options = pa.csv.ReadOptions(
            block_size=self.block_size, autogenerate_column_names=True
        )
        # Polling the schema first gives the autogenerated
        # names we need to force every column to string.
        with pa.csv.open_csv(self.filename, read_options=read_options) as reader:
            names = reader.schema.names

        convert_options = pa.csv.ConvertOptions(
            column_types={name: pa.string() for name in names},
            null_values=[],
            strings_can_be_null=False,
        )
        data = pa.csv.read_csv(
            self.filename, read_options=read_options, convert_options=convert_options
        )
        rows = ArrowRowSource(data, include_header=False).rows()
        logger.debug("Read %d rows from %s", len(rows), self)
        return rows
