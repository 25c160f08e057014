"""SheetGrid

A tabular data engine for records coming from spreadsheets.

Spreadsheets are a convenient place where non technical people
can maintain data, like the list of tasks assigned to a team,
but the data they hold rarely has the shape an application needs.
Rows have different lengths, groups of values are laid out side by side
and the same sheet can mix multiple kinds of records.

SheetGrid loads the rows of a spreadsheet in memory and provides
the tools to reshape them into records. Each component is isolated
within its own package and self documented.

The primary components are:

* The Table, a rectangular grid of strings with row and column operations.
* The ValueMapper, which gives access to the table as header keyed records.
* The Data Sources, which load rows from files and Arrow data.

For the user guide and code documentation of each component, refer to the
component itself.
"""

from . import table, mapping

__all__ = ("table", "mapping")
