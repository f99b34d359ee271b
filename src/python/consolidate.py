#!/usr/bin/env python3
"""
consolidate.py
--------------
Compile the per-collection Excel exports found under an input root into:

    columns_editor.csv   – which editor-report headers occur in which collections
    columns_main.csv     – same, for main reports
    compiled_ed.csv      – every editor-report row, one union header
    compiled_main.csv    – every main-report row (all parts), one union header

Usage:
    xls-consolidate -i path/to/export -o path/to/output
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path

from src.data.config import ConsolidateConfig
from src.data.registry import CollectionRegistry
from src.reports.compiled_writer import CompiledDataWriter
from src.reports.header_report import HeaderFrequencyReport

COLUMNS_EDITOR = "columns_editor.csv"
COLUMNS_MAIN   = "columns_main.csv"
COMPILED_ED    = "compiled_ed.csv"
COMPILED_MAIN  = "compiled_main.csv"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Compile header reports and data dumps from per-collection .xls exports.",
    )
    p.add_argument("-i", "--input", required=True, type=Path,
                   help="Directory containing the directories that contain the report files")
    p.add_argument("-o", "--output", required=True, type=Path, help="Output directory")
    p.add_argument("--extension", default=".xls", help="Report file extension (default: .xls)")
    return p


def consolidate(config: ConsolidateConfig) -> dict[str, Path]:
    colls = CollectionRegistry(config)
    out = config.output_dir

    counts = colls.summary()
    print(f"Empty collections: {counts['empty']}")
    print(f"Populated collections: {counts['full']}")
    print(f"Ed only collections: {counts['editor_only']}")
    print(f"Main only collections: {counts['main_only']}")

    print("\n[+] Compiling report of headings in editor reports")
    HeaderFrequencyReport(colls.editor_header_map, out / COLUMNS_EDITOR).write()

    print("\n[+] Compiling report of headings in main reports")
    HeaderFrequencyReport(colls.main_header_map, out / COLUMNS_MAIN).write()

    print("\n[+] Compiling data from main reports")
    main_writer = CompiledDataWriter(out / COMPILED_MAIN, colls.main_headers)
    total = 0
    for coll in colls.with_main:
        for report in coll.main_reports:
            total += main_writer.append_file(coll.fullname, report.rows)
    print(f"[✓] wrote {total:,} rows → {main_writer.path}")

    print("\n[+] Compiling data from ed reports")
    ed_writer = CompiledDataWriter(out / COMPILED_ED, colls.editor_headers)
    total = 0
    for coll in colls.with_editor:
        total += ed_writer.append_file(coll.fullname, coll.editor_report.rows)
    print(f"[✓] wrote {total:,} rows → {ed_writer.path}")

    return {
        COLUMNS_EDITOR: out / COLUMNS_EDITOR,
        COLUMNS_MAIN: out / COLUMNS_MAIN,
        COMPILED_ED: ed_writer.path,
        COMPILED_MAIN: main_writer.path,
    }


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    input_dir = args.input.expanduser().resolve()
    if not input_dir.is_dir():
        raise SystemExit(f"Not a valid input directory: {input_dir}")
    output_dir = args.output.expanduser().resolve()
    output_dir.mkdir(parents=True, exist_ok=True)

    consolidate(ConsolidateConfig(input_dir, output_dir, extension=args.extension))
    return 0


if __name__ == "__main__":
    sys.exit(main())
