"""Helpers operating on a row-major grid of strings.

A grid is just a ``list`` of rows, each row a ``list`` of cells.
These helpers never modify their input, they always return new rows.

>>> normalize_rows([["a"], ["b", "c"]])
[['a', ''], ['b', 'c']]
>>> transpose([["a", "b"], ["c"]])
[['a', 'c'], ['b', '']]
"""

from itertools import zip_longest
from typing import Iterable, Sequence

#: Value used for cells that have to be created to keep the grid rectangular.
FILLER = ""


def normalize_rows(rows: Iterable[Sequence[str]]) -> list[list[str]]:
    """Copy ``rows`` right padding each one to the length of the longest.

    Rows are never truncated, the widest row sets the width of the grid.
    """
    rows = [list(row) for row in rows]
    width = max((len(row) for row in rows), default=0)
    for row in rows:
        row.extend([FILLER] * (width - len(row)))
    return rows


def transpose(rows: Iterable[Sequence[str]]) -> list[list[str]]:
    """Swap rows and columns of a grid.

    Ragged input is padded with :data:`FILLER`, so the
    result is always rectangular.
    """
    return [list(column) for column in zip_longest(*rows, fillvalue=FILLER)]
