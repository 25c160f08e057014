"""Format a Table into a text table for print.

The `tabulate` function takes a :class:`sheetgrid.table.Table` whose
first row is the header and formats it into a text table.
It will truncate long cells and limit the number of rows to display.
The function is used by ``sheetgrid-view`` to display spreadsheets.

Example:

    >>> from sheetgrid.table import Table
    >>> table = Table.from_rows([
    ...     ["Title", "Status", "Deadline"],
    ...     ["Task 1", "Accepted", "8/1/2004"],
    ...     ["Task 2", "Rejected", "1/1/2024"],
    ... ])
    >>> print(tabulate(table))
    Title  | Status   | Deadline
    ------ | -------- | --------
    Task 1 | Accepted | 8/1/2004
    Task 2 | Rejected | 1/1/2024
"""

from ..table import Table


def tabulate(table: Table, max_rows: int = 20) -> str:
    """Format a Table into a text table.

    Will produce a string like::

        Title  | Status   | Deadline
        ------ | -------- | --------
        Task 1 | Accepted | 8/1/2004
        Task 2 | Rejected | 1/1/2024
    """
    if table.is_empty:
        return ""

    max_rows = max(max_rows, 0)
    cols = [format_value(v) for v in table.first]
    data_rows = table.num_rows - 1
    rows = []
    if data_rows and cols:
        rows = [
            [format_value(v) for v in row]
            for row in table.get_rows(from_row=1, count=min(data_rows, max_rows))
        ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    text = "\n".join(header + separator + textrows)
    if data_rows > max_rows:
        text += f"\n... and {data_rows - max_rows} more rows"
    return text


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: str) -> str:
    """Format a cell to be printed in the table.

    Line breaks are flattened and long cells are truncated.
    """
    v = " ".join(v.splitlines())
    if len(v) > 30:
        v = v[:27] + "..."
    return v
