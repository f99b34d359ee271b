"""
src/data/config.py
==================

Run configuration, built once from the command line and passed explicitly
to the registry and the pipeline.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

EDITOR_MARKER = "_editor_report"


@dataclass(frozen=True)
class ConsolidateConfig:
    input_dir: Path
    output_dir: Path
    extension: str = ".xls"
