"""Excel export adapter tests."""

import math

import polars as pl
from openpyxl import load_workbook

from ops_board.infrastructure import excel_repository
from ops_board.infrastructure.excel_repository import _excel_cell_value, save_output_workbook, write_output_excel


class TestWriteOutputExcel:
    def test_writes_every_sheet(self, tmp_path):
        path = tmp_path / "nested" / "summary.xlsx"
        write_output_excel(path, {"listings": pl.DataFrame({"name": ["a", "b"]}), "trend": pl.DataFrame({"x": [1]})})

        workbook = load_workbook(path, read_only=True)
        assert workbook.sheetnames == ["listings", "trend"]
        workbook.close()

    def test_openpyxl_fallback(self, tmp_path, monkeypatch):
        monkeypatch.setattr(excel_repository, "_write_with_polars", lambda path, sheets: False)
        path = tmp_path / "summary.xlsx"
        write_output_excel(path, {"a" * 40: pl.DataFrame({"x": [1.5, math.nan], "y": [1, 2]})})

        workbook = load_workbook(path)
        sheet = workbook["a" * 31]
        assert sheet["A1"].value == "x"
        assert sheet["A2"].value == 1.5
        assert sheet["A3"].value is None
        assert sheet["B3"].value == 2
        assert sheet.max_row == 3

    def test_locked_workbook_reported(self, tmp_path, monkeypatch):
        def _locked(path, sheets):
            raise PermissionError("file is open")

        monkeypatch.setattr(excel_repository, "write_output_excel", _locked)
        saved, message = save_output_workbook(tmp_path / "summary.xlsx", {})

        assert saved is False
        assert "file is open" in message


class TestExcelCellValue:
    def test_values(self):
        assert _excel_cell_value(math.inf) is None
        assert _excel_cell_value(["#a", "#b"]) == '["#a", "#b"]'
        assert _excel_cell_value("x") == "x"
        assert _excel_cell_value(None) is None
