"""Tests for the command-line entry point."""

import io

import pytest

from clockface.cli import EXIT_BAD_INPUT, EXIT_FAILURE, EXIT_OK, main


class TestMain:
    def test_writes_file_from_args(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        target = tmp_path / "clock.svg"
        assert main(["13", "45", "7", "-o", str(target)]) == EXIT_OK
        svg = target.read_text(encoding="utf-8")
        assert svg.startswith('<svg width="420" height="420"')
        assert svg.count("<line ") == 150
        assert svg.endswith("</svg>")

    def test_reads_stdin(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:  # type: ignore[no-untyped-def]
        monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3\n"))
        target = tmp_path / "clock.svg"
        assert main(["-o", str(target)]) == EXIT_OK
        assert target.exists()

    def test_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["0", "0", "0", "-o", "-"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("<svg ")
        assert out.endswith("</svg>")

    def test_options(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["0", "0", "0", "-o", "-", "--radius", "50", "--label", "XII"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith('<svg width="100" height="100"')
        assert "\nXII\n" in out

    def test_bad_time(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        target = tmp_path / "clock.svg"
        assert main(["1", "2", "-o", str(target)]) == EXIT_BAD_INPUT
        assert not target.exists()

    def test_bad_radius(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        assert main(["1", "2", "3", "--radius", "0", "-o", str(tmp_path / "c.svg")]) == EXIT_BAD_INPUT

    def test_unwritable_output(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        assert main(["1", "2", "3", "-o", str(tmp_path)]) == EXIT_FAILURE
