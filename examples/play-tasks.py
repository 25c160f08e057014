from sheetgrid.table import Table
from sheetgrid.utils.tabulate import tabulate

tasks = Table.from_rows([
    ["Title", "Points"],
    ["Essay", "10"],
    ["Quiz", "5"],
    ["Project", "20"],
])
students = Table.from_rows([
    ["Name", "Email", "Status", "Deadline", "Status", "Deadline", "Status", "Deadline"],
    ["Alice", "alice@example.com", "Done", "1/9/2024", "Todo", "1/10/2024"],
    ["Bob", "bob@example.com", "Todo", "1/9/2024", "Todo", "1/10/2024", "Todo", "1/11/2024"],
])

# Locate the student and give each of its Status/Deadline pairs a row
student = students.map.find_in_column("Email", "alice@example.com")
assigned = students.reshape_column(from_row=student, from_column=2, count=1, length=2)
assigned.insert_row(0, ["Status", "Deadline"])

report = tasks.join(assigned)
print(tabulate(report))
for record in report.map.get_rows():
    print(record)
