"""
src/data/collection.py
======================

Discovery of collections inside one export directory, and per-collection
completeness classification.

An export directory holds, per collection ``<name>``:
    <name>_editor_report.xls     (zero or one)
    <name>_<digits>.xls          (zero or more main report parts)

Collection names are taken from the editor report filenames only, so a
collection that has main parts but no editor report is never discovered.
"""

from __future__ import annotations
import re
from pathlib import Path
from typing import Iterable

from src.data.config import EDITOR_MARKER
from src.data.spreadsheet import SpreadsheetFile

EMPTY = "empty"
FULL = "full"
EDITOR_ONLY = "editor_only"
MAIN_ONLY = "main_only"


def unique_in_order(values: Iterable) -> list:
    """Deduplicate, keeping first-seen order."""
    return list(dict.fromkeys(values))


# ---------------------------------------------------------------------------
# CollectionDirectory
# ---------------------------------------------------------------------------
class CollectionDirectory:
    def __init__(self, name: str, parent: str | Path, extension: str = ".xls"):
        self.name = name
        self.path = Path(parent) / name
        self.extension = extension

    def __repr__(self) -> str:
        return f"CollectionDirectory({str(self.path)!r})"

    @property
    def editor_suffix(self) -> str:
        return f"{EDITOR_MARKER}{self.extension}"

    def _children(self) -> list[str]:
        return sorted(p.name for p in self.path.iterdir() if p.is_file())

    @property
    def editor_reports(self) -> list[str]:
        return [fn for fn in self._children() if fn.endswith(self.editor_suffix)]

    @property
    def main_reports(self) -> list[str]:
        return [fn for fn in self._children() if not fn.endswith(self.editor_suffix)]

    @property
    def collections(self) -> list[str]:
        return [fn[: -len(self.editor_suffix)] for fn in self.editor_reports]

    def editor_report_for(self, coll: str) -> Path | None:
        prefix = f"{coll}{EDITOR_MARKER}"
        matches = [fn for fn in self.editor_reports if fn.startswith(prefix)]
        if not matches:
            return None
        return self.path / matches[0]

    def main_reports_for(self, coll: str) -> list[Path] | None:
        """Paths of the numbered main parts, or None if there are none."""
        rx = re.compile(rf"{re.escape(coll)}_\d+{re.escape(self.extension)}")
        matches = [fn for fn in self.main_reports if rx.fullmatch(fn)]
        if not matches:
            return None
        return [self.path / fn for fn in matches]


# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------
class Collection:
    def __init__(self, name: str, directory: CollectionDirectory):
        self.name = name
        self.parent = directory.name
        self.fullname = f"{self.parent}/{name}"
        self.editor_report = SpreadsheetFile(directory.editor_report_for(name))
        self.main_reports = [
            SpreadsheetFile(p) for p in directory.main_reports_for(name) or []
        ]
        if not self.headers_match:
            self._mismatched_headers_warning()

    def __repr__(self) -> str:
        return f"Collection({self.fullname!r}, state={self.state!r})"

    # -- headers ------------------------------------------------------------
    @property
    def editor_headers(self) -> list[str]:
        return self.editor_report.headers

    @property
    def main_headers(self) -> list[str]:
        return unique_in_order(h for r in self.main_reports for h in r.headers)

    @property
    def multi_main(self) -> bool:
        return len(self.main_reports) > 1

    @property
    def headers_match(self) -> bool:
        """True unless a later main part's header set differs from the first."""
        if not self.multi_main:
            return True
        first, *rest = [r.headers for r in self.main_reports]
        first_set = set(first)
        return all(
            len(hdrs) == len(first) and not set(hdrs) ^ first_set
            for hdrs in rest
        )

    def _mismatched_headers_warning(self):
        print(
            f"[!] WARNING: Headers differ in the multiple main reports for {self.fullname}. "
            "Headers in multiple files for the same collection are assumed to be identical"
        )

    # -- completeness -------------------------------------------------------
    @property
    def empty_editor(self) -> bool:
        return self.editor_report.empty

    @property
    def empty_main(self) -> bool:
        # a mix of empty and populated parts still counts as main data
        return all(r.empty for r in self.main_reports)

    @property
    def empty(self) -> bool:
        return self.empty_editor and self.empty_main

    @property
    def full(self) -> bool:
        return not self.empty_editor and not self.empty_main

    @property
    def editor_only(self) -> bool:
        return not self.empty_editor and self.empty_main

    @property
    def main_only(self) -> bool:
        return self.empty_editor and not self.empty_main

    @property
    def state(self) -> str:
        if self.full:
            return FULL
        if self.editor_only:
            return EDITOR_ONLY
        if self.main_only:
            return MAIN_ONLY
        return EMPTY
