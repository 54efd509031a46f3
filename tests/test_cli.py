from __future__ import annotations

from xliff_fixer.cli.fix_xliff import main
from xliff_fixer.settings import settings


def test_repairs_to_default_output(tmp_path, xliff_broken):
    src = tmp_path / "strings.xlf"
    src.write_text(xliff_broken, encoding="utf-8")
    assert main(["-i", str(src)]) == 0
    out = tmp_path / "fixed_strings.xlf"
    assert out.read_text(encoding="utf-8").endswith("</xliff>")


def test_explicit_output_and_invalid_result(tmp_path):
    src = tmp_path / "a.xml"
    src.write_text("<a><b></a>", encoding="utf-8")
    out = tmp_path / "out" / "a.xml"
    assert main(["-i", str(src), "-o", str(out)]) == 1
    assert out.read_text(encoding="utf-8") == "<a><b></a>"


def test_rejected_file(tmp_path):
    src = tmp_path / "a.txt"
    src.write_text("<a/>", encoding="utf-8")
    assert main(["-i", str(src)]) == 2


def test_missing_file(tmp_path):
    assert main(["-i", str(tmp_path / "missing.xlf")]) == 2


def test_ai_without_key(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "")
    src = tmp_path / "a.xlf"
    src.write_text("<a>", encoding="utf-8")
    assert main(["-i", str(src), "--ai"]) == 2
    assert not (tmp_path / "fixed_a.xlf").exists()
