from __future__ import annotations

import io
import json
import subprocess
import sys
from pathlib import Path

from tle_codec.cli import main

REPO_ROOT = Path(__file__).resolve().parents[2]

TLE_TEXT = """ISS (ZARYA)
1 25544U 98067A   24157.20856222  .00006411  00000+0  11842-3 0  9996
2 25544  51.6412 205.1217 0004225 113.2939 306.8174 15.50073703551595
"""

CANONICAL_TEXT = """ISS (ZARYA)
1 25544U 98067A   24157.20856222  .00006411  00000-0  11842-3 0  9997
2 25544  51.6412 205.1217 0004225 113.2939 306.8174 15.50073703551595
"""


def _write(tmp_path: Path, text: str, name: str = "catalog.tle") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_check_accepts_valid_file(tmp_path, capsys) -> None:
    path = _write(tmp_path, TLE_TEXT + CANONICAL_TEXT)
    assert main(["check", str(path)]) == 0
    out, err = capsys.readouterr()
    assert out.strip() == f"{path}: 2 sets OK"
    assert err == ""


def test_check_reports_bad_checksum(tmp_path, capsys) -> None:
    good = _write(tmp_path, CANONICAL_TEXT, "good.tle")
    bad = _write(tmp_path, CANONICAL_TEXT.replace("9997", "9990"), "bad.tle")
    assert main(["check", str(good), str(bad)]) == 1
    out, err = capsys.readouterr()
    assert f"{good}: 1 sets OK" in out
    assert f"{bad}: FAILED after 0 valid sets" in err
    assert "check_failed" in err


def test_check_missing_file(tmp_path, capsys) -> None:
    assert main(["check", str(tmp_path / "absent.tle")]) == 1
    _, err = capsys.readouterr()
    assert "not found" in err


def test_show_emits_json_lines(tmp_path, capsys) -> None:
    path = _write(tmp_path, TLE_TEXT)
    assert main(["show", str(path)]) == 0
    out, _ = capsys.readouterr()
    record = json.loads(out.strip())
    assert record["name"] == "ISS (ZARYA)"
    assert record["satellite_number"] == 25544
    assert record["epoch_year"] == 2024
    assert record["bstar_drag"] == 1.1842e-4


def test_show_summary_and_century_rule(tmp_path, capsys) -> None:
    text = CANONICAL_TEXT.replace("24157.20856222", "58157.20856222")
    path = _write(tmp_path, text)
    assert main(["show", "--summary", "--century-rule", "pivot-1957", str(path)]) == 0
    out, _ = capsys.readouterr()
    assert out.startswith("ISS (ZARYA): TLE 1958 157.209")


def test_show_verify_checksum_flag(tmp_path, capsys) -> None:
    path = _write(tmp_path, CANONICAL_TEXT.replace("9997", "9990"))
    assert main(["show", str(path)]) == 0
    assert main(["show", "--verify-checksum", str(path)]) == 1
    _, err = capsys.readouterr()
    assert "Checksum failed" in err


def test_normalize_rewrites_canonical_form(tmp_path, capsys) -> None:
    path = _write(tmp_path, TLE_TEXT)
    assert main(["normalize", str(path)]) == 0
    out, _ = capsys.readouterr()
    assert out == CANONICAL_TEXT

    assert main(["normalize", "--no-name", str(path)]) == 0
    out, _ = capsys.readouterr()
    assert out == "".join(CANONICAL_TEXT.splitlines(keepends=True)[1:])


def test_normalize_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(TLE_TEXT))
    assert main(["normalize", "-"]) == 0
    out, _ = capsys.readouterr()
    assert out == CANONICAL_TEXT


def test_no_command_prints_help(capsys) -> None:
    assert main([]) == 1
    out, _ = capsys.readouterr()
    assert "usage: tle-codec" in out


def test_module_entrypoint() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "tle_codec", "--help"],
        cwd=REPO_ROOT,
        text=True,
        capture_output=True,
        check=False,
    )
    assert result.returncode == 0, result.stderr
    assert "{check,show,normalize}" in result.stdout
