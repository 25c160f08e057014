"""The SheetGrid Table engine

The table engine stores tabular data fetched from spreadsheets
as a rectangular grid of strings and provides the operations
required to reshape it into the records an application needs.

Spreadsheet ranges are usually read as a list of rows,
rows that can have a different length when trailing cells are empty.
The :class:`Table` normalizes them so that all rows have the same length:

>>> from sheetgrid.table import Table
>>> table = Table.from_rows([
...     ["Title", "Status", "Deadline"],
...     ["Task 1", "Accepted"],
...     ["Task 2", "Rejected", "12/12/2012"],
... ])
>>> table.get_column(2)
['Deadline', '', '12/12/2012']

Tables can then be modified in place adding, inserting
or dropping rows and columns:

>>> table.drop_column(0)
>>> table.first
['Status', 'Deadline']

Or combined into new tables through :meth:`Table.join`,
:meth:`Table.reshape_column` and :meth:`Table.reshape_row`.

Calling an operation with indices that are out of the
table boundaries raises :class:`TableContractError`,
as that is always a bug in the caller. The only exceptions
are :meth:`Table.drop_row` and :meth:`Table.drop_column`
that silently ignore rows and columns that don't exist.
"""

from ..errors import TableContractError
from .grid import FILLER
from .join import JoinType
from .table import Table

__all__ = ("Table", "JoinType", "TableContractError", "FILLER")
