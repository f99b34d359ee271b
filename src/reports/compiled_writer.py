"""
src/reports/compiled_writer.py
==============================

Append-only CSV writer that lines up rows from heterogeneous sheets under one
union header. Each source file is appended in its own open/write/close cycle,
so only one file's rows are held at a time.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Mapping, Sequence
import pandas as pd

from src.data.collection import unique_in_order

COLLNAME = "dc_collection_name"
UNUSED = "%FIELD NOT USED IN COLLECTION%"


class CompiledDataWriter:
    def __init__(self, path: str | Path, headers: Sequence[str]):
        self.path = Path(path)
        self.headers = unique_in_order([COLLNAME, *headers])
        pd.DataFrame(columns=self.headers).to_csv(self.path, index=False, encoding="utf-8")

    def prep_row(self, coll: str, row: Mapping) -> list:
        """Target-ordered values; absent columns get UNUSED, extras are dropped."""
        row = {**row, COLLNAME: coll}
        return [row.get(hdr, UNUSED) for hdr in self.headers]

    def append_file(self, coll: str, data: Iterable[Mapping]) -> int:
        records = [self.prep_row(coll, row) for row in data]
        if not records:
            return 0
        pd.DataFrame(records, columns=self.headers).to_csv(
            self.path, mode="a", header=False, index=False, encoding="utf-8"
        )
        print(f"  {coll} data written")
        return len(records)
