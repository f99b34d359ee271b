"""
Shared fixtures: tiny .xlsx export trees written into tmp_path.
"""

import pandas as pd
import pytest

from src.data.config import ConsolidateConfig


def write_sheet(path, headers, rows=()):
    """Write one worksheet: header row plus data rows (lists in header order)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(list(rows), columns=headers).to_excel(path, index=False)
    return path


@pytest.fixture
def sheet(tmp_path):
    def _sheet(relpath, headers, rows=()):
        return write_sheet(tmp_path / "export" / relpath, headers, rows)
    return _sheet


@pytest.fixture
def config(tmp_path):
    (tmp_path / "export").mkdir(exist_ok=True)
    out = tmp_path / "out"
    out.mkdir()
    return ConsolidateConfig(tmp_path / "export", out, extension=".xlsx")
