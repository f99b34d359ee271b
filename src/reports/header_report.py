"""
src/reports/header_report.py
============================

Header-frequency report: which column headers appear in which collections.

Output columns:
    column_name, collection_count, <collection 1>, <collection 2>, ...
with a 1/0 indicator per collection.
"""

from __future__ import annotations
from functools import cached_property
from pathlib import Path
from typing import Mapping, Sequence
import pandas as pd

from src.data.collection import unique_in_order

COLNAME = "column_name"
COLCT = "collection_count"


class HeaderFrequencyReport:
    def __init__(self, data: Mapping[str, Sequence[str]], path: str | Path):
        self.data = data
        self.path = Path(path)

    @property
    def colls(self) -> list[str]:
        return list(self.data)

    @property
    def uniq_headers(self) -> list[str]:
        return unique_in_order(h for hdrs in self.data.values() for h in hdrs)

    @property
    def report_headers(self) -> list[str]:
        return [COLNAME, COLCT, *self.colls]

    @cached_property
    def compiled(self) -> dict[str, list[str]]:
        """header -> collections whose header list contains it."""
        found = {hdr: [] for hdr in self.uniq_headers}
        for coll, hdrs in self.data.items():
            for hdr in unique_in_order(hdrs):
                found[hdr].append(coll)
        return found

    def row(self, header: str) -> dict:
        having = self.compiled[header]
        r = {COLNAME: header, COLCT: len(having)}
        for coll in self.colls:
            r[coll] = 1 if coll in having else 0
        return r

    def rows(self) -> list[dict]:
        return [self.row(hdr) for hdr in self.uniq_headers]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows(), columns=self.report_headers)

    def write(self) -> Path:
        self.to_frame().to_csv(self.path, index=False, encoding="utf-8")
        print(f"[✓] wrote {len(self.uniq_headers):,} headers × {len(self.colls):,} collections → {self.path}")
        return self.path
