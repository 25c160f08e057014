"""Access tables as records.

Spreadsheets commonly use their first row as the header
that names the content of each column. The :class:`ValueMapper`
uses such header to convert the rows of a :class:`sheetgrid.table.Table`
into dictionaries, one for each row::

    | Title  | Status   |        {"Title": "Task 1", "Status": "Accepted"}
    | Task 1 | Accepted |  --->  {"Title": "Task 2", "Status": "Rejected"}
    | Task 2 | Rejected |

The same can be done for tables where the header is the first column,
in which case each column of the table becomes a dictionary.

Every table exposes its mapper as ``table.map``.
"""

from .mapper import ValueMapper

__all__ = ("ValueMapper",)
