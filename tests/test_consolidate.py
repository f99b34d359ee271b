"""
End-to-end runs of the consolidation pipeline and the command line entry.
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pandas as pd
import pytest
from src.python.consolidate import (
    COLUMNS_EDITOR, COLUMNS_MAIN, COMPILED_ED, COMPILED_MAIN,
    consolidate, main,
)
from src.data.config import ConsolidateConfig
from src.reports.compiled_writer import COLLNAME, UNUSED


def read(path):
    return pd.read_csv(path, dtype=str, keep_default_na=False)


@pytest.fixture
def export(sheet):
    # the worked example: editor [id,title] x2, main [id,title,author] x3
    sheet("A/foo_editor_report.xlsx", ["id", "title"],
          [["e1", "Ed one"], ["e2", "Ed two"]])
    sheet("A/foo_1.xlsx", ["id", "title", "author"],
          [["m1", "One", "Ann"], ["m2", "Two", "Bob"], ["m3", "Three", "Cy"]])


def test_worked_example(export, config):
    out = consolidate(config)

    main_df = read(out[COMPILED_MAIN])
    assert list(main_df.columns) == [COLLNAME, "id", "title", "author"]
    assert len(main_df) == 3
    assert (main_df[COLLNAME] == "A/foo").all()

    ed_df = read(out[COMPILED_ED])
    assert list(ed_df.columns) == [COLLNAME, "id", "title"]
    assert len(ed_df) == 2
    assert ed_df["id"].tolist() == ["e1", "e2"]


def test_summary_printed(export, config, capsys):
    consolidate(config)
    out = capsys.readouterr().out
    assert "Empty collections: 0" in out
    assert "Populated collections: 1" in out
    assert "Ed only collections: 0" in out
    assert "Main only collections: 0" in out


def test_multi_part_collection(sheet, config, capsys):
    sheet("A/foo_editor_report.xlsx", ["id"], [["e1"]])
    sheet("A/foo_1.xlsx", ["id", "title"], [["m1", "a"], ["m2", "b"]])
    sheet("A/foo_2.xlsx", ["id", "author"], [["m3", "c"]])
    sheet("B/bar_editor_report.xlsx", ["id", "note"], [["e2", "n"]])
    sheet("B/bar_1.xlsx", ["id", "title"], [["m4", "d"]])
    sheet("B/nil_editor_report.xlsx", ["id", "ghost"])

    out = consolidate(config)
    warnings = [ln for ln in capsys.readouterr().out.splitlines() if "WARNING" in ln]
    assert len(warnings) == 1 and "A/foo" in warnings[0]

    main_df = read(out[COMPILED_MAIN])
    # header row once, rows from every part of every collection
    assert len(main_df) == 2 + 1 + 1
    assert main_df[COLLNAME].tolist() == ["A/foo", "A/foo", "A/foo", "B/bar"]
    assert list(main_df.columns) == [COLLNAME, "id", "title", "author"]
    m3 = main_df.set_index("id").loc["m3"]
    assert m3["title"] == UNUSED and m3["author"] == "c"

    ed_df = read(out[COMPILED_ED])
    assert ed_df[COLLNAME].tolist() == ["A/foo", "B/bar"]
    assert ed_df.set_index("id").loc["e1", "note"] == UNUSED

    # the empty collection shows up nowhere
    columns_ed = read(out[COLUMNS_EDITOR])
    assert "B/nil" not in columns_ed.columns
    assert "ghost" not in columns_ed["column_name"].tolist()
    assert "B/nil" not in ed_df[COLLNAME].tolist()

    columns_main = read(out[COLUMNS_MAIN])
    assert list(columns_main.columns) == ["column_name", "collection_count", "A/foo", "B/bar"]


def test_editor_only_collection_contributes_to_editor_outputs_only(sheet, config):
    sheet("A/foo_editor_report.xlsx", ["id"], [["e1"]])
    out = consolidate(config)
    assert len(read(out[COMPILED_ED])) == 1
    assert len(read(out[COMPILED_MAIN])) == 0
    assert "A/foo" not in read(out[COLUMNS_MAIN]).columns


def test_cli_runs(export, config, tmp_path):
    outdir = tmp_path / "fresh" / "reports"
    assert main(["-i", str(config.input_dir), "-o", str(outdir), "--extension", ".xlsx"]) == 0
    for name in (COLUMNS_EDITOR, COLUMNS_MAIN, COMPILED_ED, COMPILED_MAIN):
        assert (outdir / name).exists()


def test_cli_rejects_missing_input(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["-i", str(tmp_path / "missing"), "-o", str(tmp_path / "out")])
    assert "Not a valid input directory" in str(exc.value)
    assert not (tmp_path / "out").exists()


# --------------------------------------------------------------------
# Committed .xls export: the worked example with the default extension
# --------------------------------------------------------------------
XLS_EXPORT = Path(__file__).parent / "fixtures" / "export"


def test_xls_export_with_default_config(tmp_path):
    """
    foo_editor_report.xls holds 2 rows of [id,title]; foo_1.xls holds 3 rows
    of [id,title,author]. Read through xlrd with the stock .xls extension.
    """
    config = ConsolidateConfig(XLS_EXPORT, tmp_path)
    assert config.extension == ".xls"
    out = consolidate(config)

    assert out[COMPILED_MAIN].read_text(encoding="utf-8").splitlines() == [
        "dc_collection_name,id,title,author",
        "A/foo,1,a,x",
        "A/foo,2,b,y",
        "A/foo,3,c,z",
    ]
    assert out[COMPILED_ED].read_text(encoding="utf-8").splitlines() == [
        "dc_collection_name,id,title",
        "A/foo,1,a",
        "A/foo,2,b",
    ]
    assert read(out[COLUMNS_EDITOR])["column_name"].tolist() == ["id", "title"]
    assert read(out[COLUMNS_MAIN])["column_name"].tolist() == ["id", "title", "author"]


def test_cli_reads_sys_argv(tmp_path, monkeypatch):
    outdir = tmp_path / "reports"
    monkeypatch.setattr("sys.argv", ["xls-consolidate", "-i", str(XLS_EXPORT), "-o", str(outdir)])
    assert main() == 0
    assert len(read(outdir / COMPILED_MAIN)) == 3


def test_config_is_frozen(tmp_path):
    config = ConsolidateConfig(tmp_path, tmp_path)
    with pytest.raises(FrozenInstanceError):
        config.extension = ".xlsx"
