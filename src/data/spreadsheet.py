"""
src/data/spreadsheet.py
=======================

Thin wrapper around one exported workbook. Only the first worksheet is read;
its first row is the header row, everything below it is data.
"""

from __future__ import annotations
from functools import cached_property
from pathlib import Path
import pandas as pd

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
ENGINES = {
    ".xls": "xlrd",       # legacy BIFF exports
    ".xlsx": "openpyxl",
}


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------
def load_first_sheet(path: str | Path) -> pd.DataFrame:
    """Read first worksheet raw (no header inference, blanks kept as "")."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    return pd.read_excel(
        path,
        sheet_name=0,
        header=None,
        dtype=object,
        keep_default_na=False,
        engine=ENGINES.get(path.suffix.lower()),
    )


# ---------------------------------------------------------------------------
# SpreadsheetFile
# ---------------------------------------------------------------------------
class SpreadsheetFile:
    """
    One report file. ``path`` may be None when a collection has no file of
    this report type; the instance then behaves as an empty sheet.
    """

    def __init__(self, path: str | Path | None):
        self.path = Path(path) if path is not None else None

    def __repr__(self) -> str:
        return f"SpreadsheetFile({self.path!r})"

    @cached_property
    def _sheet(self) -> pd.DataFrame:
        if self.path is None:
            return pd.DataFrame()
        return load_first_sheet(self.path)

    @cached_property
    def headers(self) -> list[str]:
        if self._sheet.empty:
            return []
        return [str(v) for v in self._sheet.iloc[0]]

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @cached_property
    def row_count(self) -> int:
        return max(len(self._sheet) - 1, 0)

    @property
    def empty(self) -> bool:
        return self.row_count == 0

    @cached_property
    def rows(self) -> list[dict]:
        """Data rows as header -> value dicts; header row dropped."""
        if self.empty:
            return []
        headers = self.headers
        return [
            dict(zip(headers, values))
            for values in self._sheet.iloc[1:].itertuples(index=False, name=None)
        ]
