# Importing the modules registers every spreadsheet reader
from . import csv_sheet, excel_workbook  # noqa: F401
