"""Tests for the stamp CLI."""
from pathlib import Path

import pytest

import stamp_cli


def test_generates_one_png_per_page(tmp_path, monkeypatch):
    monkeypatch.delenv("QRSTAMP_OUTPUT_DIR", raising=False)
    src = tmp_path / "exam.txt"
    src.write_bytes(b"hello")
    out = tmp_path / "out"
    code = stamp_cli.main([str(src), "--pages", "2", "--output-dir", str(out)])
    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["qrcode-0-1.png", "qrcode-0-2.png"]


def test_atomic_flag_and_env_defaults(tmp_path, monkeypatch):
    src = tmp_path / "exam.txt"
    src.write_bytes(b"hello")
    out = tmp_path / "out"
    monkeypatch.setenv("QRSTAMP_OUTPUT_DIR", str(out))
    monkeypatch.setenv("QRSTAMP_SET_ID", "3")
    monkeypatch.setenv("QRSTAMP_PREFIX", "exam")
    assert stamp_cli.main([str(src), "--atomic"]) == 0
    assert [p.name for p in out.iterdir()] == ["exam-3-1.png"]


def test_missing_input_exits_nonzero(tmp_path, capsys):
    code = stamp_cli.main([str(tmp_path / "missing.pdf"), "--output-dir", str(tmp_path / "out")])
    assert code == 1
    assert "Error" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_zero_pages_exits_nonzero(tmp_path):
    src = tmp_path / "exam.txt"
    src.write_bytes(b"hello")
    assert stamp_cli.main([str(src), "--pages", "0", "--output-dir", str(tmp_path / "out")]) == 1


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        stamp_cli.main(["--version"])
    assert exc.value.code == 0
    assert "0.3.0" in capsys.readouterr().out
