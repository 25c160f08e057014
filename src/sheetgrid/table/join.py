"""Structural join of two tables.

Unlike relational joins, which align rows by comparing keys,
the structural join aligns rows by their position.
Row ``0`` of one table is glued to row ``0`` of the other one and so on,
until one of the two tables runs out of rows::

    left:                 right:
    +-------+--------+    +--------+
    | Title | Status |    | Notes  |
    | T1    | Done   |    | Note 1 |
    | T2    | Todo   |    +--------+
    +-------+--------+

    left.join(right):
    +-------+--------+--------+
    | Title | Status | Notes  |
    | T1    | Done   | Note 1 |
    +-------+--------+--------+

Which table provides the leading columns is decided
by the :class:`JoinType`.
"""

import enum
from typing import Sequence


class JoinType(enum.Enum):
    """Which side of a join provides the leading columns.

    * ``LEFT``: the table the join was invoked on comes first.
    * ``RIGHT``: the table passed as argument comes first.
    """

    LEFT = "left"
    RIGHT = "right"


def join_rows(
    left_rows: Sequence[Sequence[str]],
    left_width: int,
    right_rows: Sequence[Sequence[str]],
) -> list[list[str]]:
    """Concatenate rows of two grids position by position.

    Each resulting row is made of the first ``left_width`` cells
    of the left row followed by all cells of the right row.
    Only as many rows as the shortest grid has are emitted.

    >>> join_rows([["a", "b"], ["c", "d"]], 2, [["1"]])
    [['a', 'b', '1']]
    """
    return [
        list(left[:left_width]) + list(right)
        for left, right in zip(left_rows, right_rows)
    ]
