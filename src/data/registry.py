"""
src/data/registry.py
====================

All collections found under one input root, partitioned by completeness.
"""

from __future__ import annotations
from functools import cached_property

from src.data.collection import (
    EDITOR_ONLY, EMPTY, FULL, MAIN_ONLY,
    Collection, CollectionDirectory, unique_in_order,
)
from src.data.config import ConsolidateConfig


class CollectionRegistry:
    def __init__(self, config: ConsolidateConfig):
        self.config = config
        children = sorted(p.name for p in config.input_dir.iterdir() if p.is_dir())
        print(f"[+] Processing {len(children)} directories...")
        dirs = [
            CollectionDirectory(d, config.input_dir, extension=config.extension)
            for d in children
        ]
        names = [(d, c) for d in dirs for c in d.collections]
        print(f"[+] ...containing {len(names)} collections")
        self.all = [Collection(c, d) for d, c in names]

    def _in_state(self, state: str) -> list[Collection]:
        return [c for c in self.all if c.state == state]

    # -- partitions ---------------------------------------------------------
    @cached_property
    def empty(self) -> list[Collection]:
        return self._in_state(EMPTY)

    @cached_property
    def full(self) -> list[Collection]:
        return self._in_state(FULL)

    @cached_property
    def editor_only(self) -> list[Collection]:
        return self._in_state(EDITOR_ONLY)

    @cached_property
    def main_only(self) -> list[Collection]:
        return self._in_state(MAIN_ONLY)

    @property
    def with_editor(self) -> list[Collection]:
        return self.full + self.editor_only

    @property
    def with_main(self) -> list[Collection]:
        return self.full + self.main_only

    def summary(self) -> dict[str, int]:
        return {
            EMPTY: len(self.empty),
            FULL: len(self.full),
            EDITOR_ONLY: len(self.editor_only),
            MAIN_ONLY: len(self.main_only),
        }

    # -- headers ------------------------------------------------------------
    @cached_property
    def editor_header_map(self) -> dict[str, list[str]]:
        """fullname -> editor headers, for collections with editor data."""
        return {c.fullname: c.editor_headers for c in self.all if not c.empty_editor}

    @cached_property
    def main_header_map(self) -> dict[str, list[str]]:
        """fullname -> main headers, for collections with main data."""
        return {c.fullname: c.main_headers for c in self.all if not c.empty_main}

    @property
    def editor_headers(self) -> list[str]:
        return unique_in_order(h for c in self.with_editor for h in c.editor_headers)

    @property
    def main_headers(self) -> list[str]:
        return unique_in_order(h for c in self.with_main for h in c.main_headers)
