"""Global configuration constants for the project.

Defines paths, defaults and formats used across the converter, the record
loader and the command-line tooling.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
PACKAGE_DIR: Path = PROJECT_ROOT / "csvtable"
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Logging
LOG_FILENAME_CSV_TO_HTML: str = "csv_to_html.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL: str = "INFO"

# CSV reading defaults
DEFAULT_DELIMITER: str = ","
DEFAULT_ENCODING: str = "utf-8"

# HTML table defaults
DEFAULT_TABLE_CLASS: str = "table-csv-data"
DEFAULT_TABLE_ID: str = ""
HEADER_CELL_SCOPE: str = "col"

# Standalone document output
STANDALONE_DOCUMENT_TITLE: str = "CSV data"
STANDALONE_DOCUMENT_TEMPLATE: str = (
    '<!DOCTYPE html><html><head><meta charset="utf-8">'
    "<title>{title}</title></head><body>{body}</body></html>"
)

# Environment variable names read by ``csvtable.settings``
ENV_TABLE_CLASS: str = "CSVTABLE_TABLE_CLASS"
ENV_TABLE_ID: str = "CSVTABLE_TABLE_ID"
ENV_CELL_ATTRIBUTE: str = "CSVTABLE_CELL_ATTRIBUTE"
ENV_ROW_ATTRIBUTE: str = "CSVTABLE_ROW_ATTRIBUTE"
ENV_DELIMITER: str = "CSVTABLE_DELIMITER"
ENV_ENCODING: str = "CSVTABLE_ENCODING"
ENV_LOG_LEVEL: str = "CSVTABLE_LOG_LEVEL"
