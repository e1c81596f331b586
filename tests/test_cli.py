"""Tests for the bigtext command line."""

import pytest

from bigtext import __version__
from bigtext.cli import main

A_ART = " ***  \n*   * \n***** \n*   * \n*   * \n"
ONE_ART = "    * \n" * 5


def test_render_prints_header_and_art(capsys) -> None:
    assert main(["A"]) == 0

    assert capsys.readouterr().out == 'string="A"\n' + A_ART


def test_render_command_name_is_optional(capsys) -> None:
    assert main(["render", "A"]) == 0

    assert capsys.readouterr().out == 'string="A"\n' + A_ART


def test_render_each_argument(capsys) -> None:
    assert main(["A", "1", "--no-header"]) == 0

    assert capsys.readouterr().out == A_ART + ONE_ART


def test_render_empty_string(capsys) -> None:
    assert main(["--", ""]) == 0

    assert capsys.readouterr().out == 'string=""\n' + "\n" * 5


def test_render_with_charset(capsys) -> None:
    assert main(["--charset", "digits", "--no-header", "A1"]) == 0

    out = capsys.readouterr().out
    assert out == "".join("      " + row + "\n" for row in ONE_ART.splitlines())


def test_render_with_glyph_file(capsys, glyph_file) -> None:
    assert main(["--glyphs", str(glyph_file), "--no-header", "Hi"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "H   H IIIII "
    assert lines[2] == "HHHHH   I   "


def test_render_header_setting_from_environment(capsys, monkeypatch) -> None:
    monkeypatch.setenv("BIGTEXT_SHOW_HEADER", "false")

    assert main(["A"]) == 0
    assert capsys.readouterr().out == A_ART


def test_render_with_config_file(capsys, tmp_path) -> None:
    config = tmp_path / "bigtext.yaml"
    config.write_text("show_header: false\ncharset: digits\n", encoding="utf-8")

    assert main(["--config", str(config), "1"]) == 0
    assert capsys.readouterr().out == ONE_ART


def test_render_logs_missing_glyphs(capsys) -> None:
    assert main(["--log-level", "info", "--no-header", "a"]) == 0

    captured = capsys.readouterr()
    assert captured.out == "      \n" * 5
    assert "No glyph for 'a'" in captured.err


def test_render_invalid_glyph_file(capsys, tmp_path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text('{"A": [1]}', encoding="utf-8")

    assert main(["--glyphs", str(bad), "A"]) == 1
    assert "Row 0 of glyph 'A' must be a string" in capsys.readouterr().err


def test_render_invalid_charset(capsys) -> None:
    assert main(["--charset", "runes", "A"]) == 1
    assert "Invalid choice for charset" in capsys.readouterr().err


def test_render_requires_text(capsys) -> None:
    assert main(["render"]) == 1
    assert "Missing required argument: text" in capsys.readouterr().err


def test_chars_lists_printables(capsys) -> None:
    assert main(["chars"]) == 0

    out = capsys.readouterr().out
    assert "printables: 55 characters" in out
    assert "U+0041" in out
    assert "punctuation" in out


def test_chars_with_glyph_file(capsys, glyph_file) -> None:
    assert main(["chars", "--glyphs", str(glyph_file)]) == 0

    out = capsys.readouterr().out
    assert "2 characters" in out
    assert "custom" in out


def test_version(capsys) -> None:
    assert main(["version"]) == 0

    assert __version__ in capsys.readouterr().out


def test_help(capsys) -> None:
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "render" in out
    assert "chars" in out


@pytest.mark.parametrize("args", [["render", "--help"], ["chars", "-h"]])
def test_command_help(capsys, args) -> None:
    assert main(args) == 0

    assert "Options:" in capsys.readouterr().out


def test_render_dash_prefixed_text(capsys) -> None:
    assert main(["--no-header", "-1"]) == 0

    # "-" has no glyph, "1" does
    assert capsys.readouterr().out == "".join("      " + row + "\n" for row in ONE_ART.splitlines())
