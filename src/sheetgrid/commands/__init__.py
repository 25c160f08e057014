"""Shell commands exposing SheetGrid functionalities.

View
====

``sheetgrid-view`` prints the content of a CSV export of a spreadsheet::

    sheetgrid-view tasks.csv

Passing ``--records`` prints each row as a JSON object keyed by the header row,
which is the shape in which applications usually consume spreadsheet data::

    sheetgrid-view --records tasks.csv
    {"Title": "Task 1", "Status": "Accepted", "Deadline": "8/1/2004"}
    {"Title": "Task 2", "Status": "Rejected", "Deadline": "12/12/2012"}

The keys can be replaced providing an ``--alias`` for each column.
"""
