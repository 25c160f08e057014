import pytest

from sheetgrid.table import Table, TableContractError

TASKS_DATA = [
    ["Title", "Status", "Deadline"],
    ["Task 1", "Accepted", "8/1/2004"],
    ["Task 2", "Rejected", "12/12/2012"],
    ["Task 3", "Not Submitted", "1/1/2024"],
]


@pytest.fixture
def table():
    return Table.from_rows(TASKS_DATA)


def test_num_rows_and_num_columns(table):
    assert table.num_rows == 4
    assert table.num_columns == 3


def test_empty_table():
    table = Table()
    assert table.is_empty
    assert not table.is_not_empty
    assert table.num_rows == 0
    assert table.num_columns == 0
    assert table.first_or_none is None
    assert table.last_or_none is None


def test_is_empty_and_is_not_empty(table):
    assert not table.is_empty
    assert table.is_not_empty


@pytest.mark.parametrize("attr", ["first", "last"])
def test_boundary_rows_of_empty_table(attr):
    with pytest.raises(TableContractError):
        getattr(Table(), attr)


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([["a"], ["b", "c"], []], [["a", ""], ["b", "c"], ["", ""]]),
        ([["a", "b"], ["c", "d"]], [["a", "b"], ["c", "d"]]),
        ([[], []], [[], []]),
        ([], []),
    ],
)
def test_from_rows_pads_to_longest_row(rows, expected):
    table = Table.from_rows(rows)
    assert list(table) == expected
    assert table.num_columns == max((len(r) for r in rows), default=0)


def test_from_rows_does_not_alias_input():
    rows = [["a", "b"]]
    table = Table.from_rows(rows)
    rows[0][0] = "changed"
    assert table.first == ["a", "b"]


def test_from_columns():
    table = Table.from_columns([["Title", "T1", "T2"], ["Status", "Done"]])
    assert list(table) == [["Title", "Status"], ["T1", "Done"], ["T2", ""]]


def test_from_columns_round_trip(table):
    columns = [table.get_column(i) for i in range(table.num_columns)]
    assert Table.from_columns(columns) == table


def test_equality(table):
    assert table == Table.from_rows(TASKS_DATA)
    assert table != Table.from_rows(TASKS_DATA[:2])
    assert table != TASKS_DATA


def test_add_row(table):
    table.add_row(["Task 4", "Incomplete", "7/7/2024"])

    assert table.num_rows == 5
    assert table.last == ["Task 4", "Incomplete", "7/7/2024"]


def test_add_row_keeps_width_as_provided(table):
    table.add_row(["Task 4"])
    assert table.last == ["Task 4"]
    assert table.num_columns == 3

    table.normalize()
    assert table.last == ["Task 4", "", ""]


def test_insert_row(table):
    table.insert_row(1, ["Task 0", "Accepted", "1/1/2000"])
    assert table.get_row(1) == ["Task 0", "Accepted", "1/1/2000"]
    assert table.get_row(2) == ["Task 1", "Accepted", "8/1/2004"]

    table.insert_row(table.num_rows, ["Task 9", "", ""])
    assert table.last == ["Task 9", "", ""]


@pytest.mark.parametrize("index", [-1, 5])
def test_insert_row_out_of_range(table, index):
    with pytest.raises(TableContractError):
        table.insert_row(index, ["x", "y", "z"])


def test_drop_row(table):
    table.drop_row(0)

    assert table.num_rows == 3
    assert table.first == ["Task 1", "Accepted", "8/1/2004"]


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_drop_row_out_of_range_is_ignored(table, index):
    table.drop_row(index)
    assert table == Table.from_rows(TASKS_DATA)


def test_add_column(table):
    col = ["Notes", "T1 Notes", "T2 Notes", "T3 Notes"]
    table.add_column(col)

    assert table.num_columns == 4
    assert table.get_column(3) == col


@pytest.mark.parametrize(
    "column, expected",
    [
        (["Notes"], ["Notes", "", "", ""]),
        (["Notes", "1", "2", "3", "4", "5"], ["Notes", "1", "2", "3"]),
    ],
)
def test_add_column_pads_or_truncates(table, column, expected):
    table.add_column(column)
    assert table.get_column(table.num_columns - 1) == expected


def test_insert_column(table):
    table.insert_column(0, ["#", "1", "2"])
    assert table.num_columns == 4
    assert table.get_column(0) == ["#", "1", "2", ""]
    assert table.get_column(1) == ["Title", "Task 1", "Task 2", "Task 3"]


@pytest.mark.parametrize("index", [-1, 4])
def test_insert_column_out_of_range(table, index):
    with pytest.raises(TableContractError):
        table.insert_column(index, [])


def test_drop_column(table):
    table.drop_column(0)

    assert table.num_columns == 2
    assert table.get_column(0) == ["Status", "Accepted", "Rejected", "Not Submitted"]


@pytest.mark.parametrize("index", [-1, 3])
def test_drop_column_out_of_range_is_ignored(table, index):
    table.drop_column(index)
    assert table == Table.from_rows(TASKS_DATA)


def test_drop_column_changes_row_lookup():
    table = Table.from_rows(
        [["Title", "Status"], ["T1", "Accepted"], ["T2", "Rejected"]]
    )
    assert table.index_of_row(["Title", "Status"]) == 0

    table.drop_column(0)
    assert list(table) == [["Status"], ["Accepted"], ["Rejected"]]
    assert table.index_of_row(["Title", "Status"]) == -1


def test_drop_row_where(table):
    seen = []

    def verdict(row, index):
        seen.append(index)
        return index == 0 or row[1] == "Rejected"

    table.drop_row_where(verdict)
    assert seen == [0, 1, 2, 3]
    assert list(table) == [
        ["Task 1", "Accepted", "8/1/2004"],
        ["Task 3", "Not Submitted", "1/1/2024"],
    ]


def test_drop_column_where(table):
    seen = []

    def verdict(column, index):
        seen.append(index)
        return column[0] in ("Title", "Deadline")

    table.drop_column_where(verdict)
    assert seen == [2, 1, 0]
    assert list(table) == [["Status"], ["Accepted"], ["Rejected"], ["Not Submitted"]]


def test_drop_all_rows_except(table):
    table.drop_all_rows_except([3, 0])
    assert list(table) == [TASKS_DATA[0], TASKS_DATA[3]]


def test_drop_all_columns_except(table):
    table.drop_all_columns_except([2, 0, 7])
    assert table.first == ["Title", "Deadline"]
    assert table.num_columns == 2


def test_index_of_row(table):
    assert table.index_of_row(["Title", "Status", "Deadline"]) == 0
    assert table.index_of_row(("Task 2", "Rejected", "12/12/2012")) == 2
    assert table.index_of_row([]) == -1
    assert table.index_of_row(["Title", "Status"]) == -1


def test_index_of_column(table):
    assert table.index_of_column(["Title", "Task 1", "Task 2", "Task 3"]) == 0
    assert table.index_of_column([]) == -1
    assert Table().index_of_column([]) == -1


def test_cell(table):
    assert table.cell(2, 1) == "Rejected"


@pytest.mark.parametrize("row, column", [(4, 0), (0, 3), (-1, 0), (0, -1)])
def test_cell_out_of_range(table, row, column):
    with pytest.raises(TableContractError):
        table.cell(row, column)


def test_get_row(table):
    assert table.get_row(0) == ["Title", "Status", "Deadline"]


def test_get_row_out_of_bounds_index(table):
    with pytest.raises(TableContractError):
        table.get_row(table.num_rows)


def test_get_row_is_detached(table):
    row = table.get_row(1)
    row[0] = "changed"
    assert table.cell(1, 0) == "Task 1"


def test_get_column(table):
    assert table.get_column(0) == ["Title", "Task 1", "Task 2", "Task 3"]


def test_get_column_out_of_bounds_index(table):
    with pytest.raises(TableContractError):
        table.get_column(table.num_columns)


def test_get_rows(table):
    rows = table.get_rows(from_row=1, from_column=1, count=2, length=1)
    assert rows == [["Accepted"], ["Rejected"]]


def test_get_rows_through_the_end(table):
    rows = table.get_rows(from_row=2, from_column=1)
    assert rows == [["Rejected", "12/12/2012"], ["Not Submitted", "1/1/2024"]]


def test_get_rows_out_of_bounds(table):
    with pytest.raises(TableContractError):
        table.get_rows(from_row=table.num_rows)
    with pytest.raises(TableContractError):
        table.get_rows(from_column=table.num_columns)
    with pytest.raises(TableContractError):
        table.get_rows(count=table.num_rows + 1)
    with pytest.raises(TableContractError):
        table.get_rows(length=table.num_columns + 1)
    with pytest.raises(TableContractError):
        table.get_rows(count=-2)
    with pytest.raises(TableContractError):
        Table().get_rows()


def test_get_columns(table):
    columns = table.get_columns(from_row=1, from_column=0, count=2, length=2)
    assert columns == [["Task 1", "Task 2"], ["Accepted", "Rejected"]]


def test_get_columns_out_of_bounds(table):
    with pytest.raises(TableContractError):
        table.get_columns(from_row=table.num_rows)
    with pytest.raises(TableContractError):
        table.get_columns(from_column=table.num_columns)
    with pytest.raises(TableContractError):
        table.get_columns(count=table.num_columns + 1)
    with pytest.raises(TableContractError):
        table.get_columns(length=table.num_rows + 1)


def test_copy_is_independent(table):
    copied = table.copy()
    assert copied == table

    copied.drop_row(0)
    copied.add_column(["x"])
    assert table == Table.from_rows(TASKS_DATA)


def test_iteration_yields_copies(table):
    for row in table:
        row.clear()
    assert table == Table.from_rows(TASKS_DATA)


def test_repr():
    assert repr(Table.from_rows([["a"], ["b"]])) == "Table([['a'], ['b']])"


def test_not_hashable(table):
    with pytest.raises(TypeError):
        hash(table)


def test_to_arrow(table):
    data = table.to_arrow()
    assert data.column_names == ["Title", "Status", "Deadline"]
    assert data.num_rows == 3
    assert data.column("Status").to_pylist() == [
        "Accepted",
        "Rejected",
        "Not Submitted",
    ]


def test_to_arrow_header_only():
    data = Table.from_rows([["Title", "Status"]]).to_arrow()
    assert data.column_names == ["Title", "Status"]
    assert data.num_rows == 0


def test_to_arrow_empty():
    assert Table().to_arrow().num_columns == 0


@pytest.fixture
def ragged_table():
    table = Table.from_rows([["Title", "Status"], ["T1", "Done"]])
    table.add_row(["T2"])
    return table


def test_ragged_rows_read_as_padded(ragged_table):
    assert ragged_table.index_of_column(["Status", "Done", ""]) == 1
    assert ragged_table.get_column(1) == ["Status", "Done", ""]
    assert ragged_table.cell(2, 1) == ""
    assert ragged_table.get_row(2) == ["T2", ""]
    assert ragged_table.get_rows(from_row=1) == [["T1", "Done"], ["T2", ""]]
    assert ragged_table.get_columns(from_column=1) == [["Status", "Done", ""]]


def test_ragged_rows_storage_is_untouched(ragged_table):
    assert ragged_table.last == ["T2"]
