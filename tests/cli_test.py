import os

import pytest

from diskreport import cli
from diskreport.config import ScanConfig
from diskreport.report import NO_FILES_MESSAGE


@pytest.fixture(autouse=True)
def _no_volume(monkeypatch):
    monkeypatch.setattr(cli, "volume_usage", lambda path: None)


def test_parser_defaults_and_single_dash_flags():
    parser = cli.build_parser()
    cfg = ScanConfig.from_args(parser.parse_args([]))
    assert cfg == ScanConfig(root=".", top=10, min_size=1000000, days_unused=30)

    args = parser.parse_args(["-dir", "/x", "-top", "3", "-min-size", "5", "-days-unused", "9"])
    assert (args.dir, args.top, args.min_size, args.days_unused) == ("/x", 3, 5, 9)


def test_validate_rejects_bad_values():
    assert ScanConfig(root="").validate() is not None
    assert ScanConfig(min_size=-1).validate() is not None
    assert ScanConfig(days_unused=-1).validate() is not None
    assert ScanConfig(top=0).validate() is None


def test_empty_dir_flag_is_an_error(capsys):
    assert cli.main(["-dir", ""]) == 1
    captured = capsys.readouterr()
    assert "directory path cannot be empty" in captured.err
    assert captured.out == ""


def test_missing_root_is_fatal(tmp_path, capsys):
    assert cli.main(["-dir", str(tmp_path / "missing")]) == 1
    captured = capsys.readouterr()
    assert "Error walking directory" in captured.err
    assert captured.out == ""


def test_no_files_above_floor(tmp_path, capsys):
    (tmp_path / "half.bin").write_bytes(b"\0" * 500_000)
    assert cli.main(["-dir", str(tmp_path), "-min-size", "1000000"]) == 0
    out = capsys.readouterr().out
    assert NO_FILES_MESSAGE in out
    assert "=== General Information ===" not in out


def test_full_report(tmp_path, capsys):
    (tmp_path / "a.TXT").write_bytes(b"a" * 100)
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_bytes(b"b" * 200)
    (sub / "tiny.log").write_bytes(b"c")

    assert cli.main(["-dir", str(tmp_path), "-min-size", "50", "-top", "5"]) == 0
    out = capsys.readouterr().out
    assert f"Analyzing files in: {tmp_path}" in out
    assert "Total files analyzed: 2" in out
    assert "Total size analyzed: 300 B" in out
    assert "2 files - txt" in out
    assert "300 B - txt" in out
    assert "tiny.log" not in out
    assert f"200 B - {sub}" in out
    headings = [line for line in out.splitlines() if line.startswith("===")]
    assert headings == [
        "=== General Information ===",
        "=== Top 5 Largest Files ===",
        "=== Top 5 Oldest/Unused Files (not accessed in 30 days) ===",
        "=== File Extensions by Count ===",
        "=== File Extensions by Size ===",
        "=== Top 5 Largest Directories ===",
    ]


def test_report_survives_undecodable_file_names(tmp_path, capsys):
    raw_dir = os.path.join(os.fsencode(str(tmp_path)), b"sub\xfe")
    try:
        os.mkdir(raw_dir)
        with open(os.path.join(raw_dir, b"bad\xff.bin"), "wb") as fh:
            fh.write(b"x" * 2000)
    except (OSError, ValueError):
        pytest.skip("filesystem rejects non UTF-8 names")

    assert cli.main(["-dir", str(tmp_path), "-min-size", "10"]) == 0
    out = capsys.readouterr().out
    assert "Total files analyzed: 1" in out
    assert "bad�.bin" in out
    assert f"2000 B - {tmp_path}{os.sep}sub�" in out
