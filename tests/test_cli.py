"""Tests for command line parsing."""

import pytest

from siv.cli import main, parse_options


def test_defaults():
    opts = parse_options(["a.png"])
    assert opts.filenames == ("a.png",)
    assert opts.ratio_percent == 150
    assert opts.ratio == pytest.approx(1.5)
    assert not opts.eager
    assert not opts.fit_monitor
    assert opts.prefetch_span == 10
    assert opts.fps == 60


def test_multiple_files_keep_order():
    opts = parse_options(["b.webp", "a.png", "c.jpg"])
    assert opts.filenames == ("b.webp", "a.png", "c.jpg")


def test_ratio_is_a_percentage():
    opts = parse_options(["--ratio", "40", "a.png"])
    assert opts.ratio == pytest.approx(0.40)


@pytest.mark.parametrize("value", ["0", "-5", "1.5", "big"])
def test_invalid_ratio_exits_with_usage(capsys, value):
    with pytest.raises(SystemExit) as excinfo:
        parse_options(["--ratio", value, "a.png"])
    assert excinfo.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_missing_filename_exits_with_usage(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
    assert "FILENAMES" in capsys.readouterr().err


def test_help_exits_zero_without_window(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "--ratio" in out
    assert "toggle magnification" in out


def test_flags():
    opts = parse_options(["--eager", "--fit-monitor", "--prefetch", "3",
                          "--font", "x.ttf", "--fps", "30", "a.png"])
    assert opts.eager and opts.fit_monitor
    assert (opts.prefetch_span, opts.font_path, opts.fps) == (3, "x.ttf", 30)
