"""Reshape rows of a grid into fixed width chunks.

Spreadsheets frequently store repeated groups of values side by side
in a single row. For example a row holding the tasks of a student
where each task takes two cells (its title and its status)::

    | Alice | T1 | Done | T2 | Todo | T3 | Todo |

Reshaping from the second column with a length of ``2``
flattens the groups into one row each::

    | T1 | Done |
    | T2 | Todo |
    | T3 | Todo |

Reshaping stops at the first group that starts with an empty cell,
so trailing unused cells of a row don't produce empty rows.
"""

from typing import Sequence

from .grid import FILLER


def chunk_rows(
    rows: Sequence[Sequence[str]], from_column: int, length: int
) -> list[list[str]]:
    """Split each row, starting at ``from_column``, in chunks of ``length`` cells.

    A short trailing chunk is right padded with empty cells,
    while a chunk that starts with an empty cell terminates
    the expansion of its row.

    >>> chunk_rows([["Alice", "T1", "Done", "T2", "", "", ""]], 1, 2)
    [['T1', 'Done'], ['T2', '']]
    """
    result = []
    for row in rows:
        cells = list(row[from_column:])
        for start in range(0, len(cells), length):
            chunk = cells[start : start + length]
            if chunk[0] == FILLER:
                break
            chunk.extend([FILLER] * (length - len(chunk)))
            result.append(chunk)
    return result
