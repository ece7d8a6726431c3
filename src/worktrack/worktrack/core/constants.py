"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HISTORY_LIMIT = 100
DEFAULT_DEPARTMENT = "General"
MIN_PASSWORD_LENGTH = 1

TOKEN_ALGORITHM = "HS256"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

EXPORT_FILENAME = "work_logs.xlsx"
EXPORT_SHEET_TITLE = "Work Logs"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
