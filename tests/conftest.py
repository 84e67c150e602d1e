"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Isolates every test from ``CSVTABLE_*`` environment variables and from a
  developer ``.env`` file.
"""

import logging
import os
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pandas as pd
import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

import csvtable.config as _cfg  # noqa: E402
from csvtable.records import RecordSet, read_csv_records  # noqa: E402

DATA_DIR = ROOT / "tests" / "data"

_ENV_NAMES = (
    _cfg.ENV_TABLE_CLASS,
    _cfg.ENV_TABLE_ID,
    _cfg.ENV_CELL_ATTRIBUTE,
    _cfg.ENV_ROW_ATTRIBUTE,
    _cfg.ENV_DELIMITER,
    _cfg.ENV_ENCODING,
    _cfg.ENV_LOG_LEVEL,
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Start each test without converter env vars and with an empty project root."""
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    project_root = tmp_path / "project"
    project_root.mkdir()
    monkeypatch.setattr(_cfg, "PROJECT_ROOT", project_root)
    monkeypatch.setattr(_cfg, "LOG_DIR", tmp_path / "logs")
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    yield project_root
    # CLI tests reconfigure the root logger; drop handlers bound to captured streams.
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)


@pytest.fixture
def prenoms_csv() -> Path:
    """Semicolon-delimited sample file with a header row."""
    return DATA_DIR / "prenoms.csv"


@pytest.fixture
def prenoms_records(prenoms_csv) -> RecordSet:
    """Five records of the sample file, skipping the first three."""
    records = read_csv_records(prenoms_csv, delimiter=";")
    frame = records.to_dataframe()
    return RecordSet(frame.iloc[3:8])


@pytest.fixture
def small_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {"name": ["Ada", "<Bob>"], "note": ["a & b", '"quoted"']},
        index=pd.RangeIndex(start=10, stop=12),
    )
