"""Tests for scriptutils.cli."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import fitz

from scriptutils.cli import main

MISSING_CONVERTER = "_nonexistent_converter_xyz_12345"


def _make_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "doc.pdf"
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 100), "cli text", fontsize=12)
    doc.save(str(pdf_path))
    doc.close()
    return pdf_path


class TestCliNormalize:
    def test_prints_clean_lines(self, tmp_path: Path, capsys):
        src = tmp_path / "list.txt"
        src.write_text("hello\nworld\nhello\nDeno\n", encoding="utf-8")

        assert main(["--no-color", "normalize", str(src)]) == 0

        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["HELLO", "WORLD", "DENO"]
        assert "HELLO: appears more than once in the list" in captured.err

    def test_bom_encoded_file(self, tmp_path: Path, capsys):
        src = tmp_path / "bom.txt"
        src.write_text("hello\nHELLO\nworld\n", encoding="utf-8-sig")

        assert main(["--no-color", "normalize", str(src)]) == 0

        assert capsys.readouterr().out.splitlines() == ["HELLO", "WORLD"]

    def test_missing_file_is_error(self, tmp_path: Path):
        assert main(["--no-color", "normalize", str(tmp_path / "none.txt")]) == 1


class TestCliExtract:
    def test_fallback_json(self, tmp_path: Path, capsys):
        pdf_path = _make_pdf(tmp_path)

        code = main(["--no-color", "extract", str(pdf_path), "--converter", MISSING_CONVERTER, "--json"])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["outcome"] == "created"
        assert data["used_fallback"] is True
        assert Path(data["text_path"]).exists()

    def test_fallback_failure_exits_1(self, tmp_path: Path, capsys):
        code = main(["--no-color", "extract", str(tmp_path / "missing.pdf"), "--converter", MISSING_CONVERTER])

        assert code == 1
        err = capsys.readouterr().err
        assert "BŁĄD / ERROR" in err
        assert err.count("Could not convert") == 1

    @patch("scriptutils.extract.spawn_and_wait", return_value=0)
    def test_incomplete_reports_failed(self, _mock_spawn, tmp_path: Path, capsys):
        code = main(["--no-color", "extract", str(tmp_path / "doc.pdf"), "--json"])

        assert code == 1
        captured = capsys.readouterr()
        assert json.loads(captured.out)["outcome"] == "failed"
        assert "Text file was not created" in captured.err

    def test_log_file_receives_errors(self, tmp_path: Path):
        log_path = tmp_path / "errors.log"

        main([
            "--no-color",
            "--log-file",
            str(log_path),
            "extract",
            str(tmp_path / "missing.pdf"),
            "--converter",
            MISSING_CONVERTER,
        ])

        assert " ERROR " in log_path.read_text(encoding="utf-8")


class TestCliRun:
    def test_echo(self, capsys):
        assert main(["--no-color", "run", "echo hi"]) == 0
        err = capsys.readouterr().err
        assert "RUNNING: echo hi" in err
        assert "FINISHED: echo hi" in err

    def test_missing_program(self):
        assert main(["--no-color", "run", MISSING_CONVERTER]) == 1
