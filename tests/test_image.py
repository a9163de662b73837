import subprocess
from unittest import mock

import pytest

from anifetch.image import ImageDisplay, chafa_size


def _parse(size):
    width, height = size.split("x")
    return int(width), int(height)


def test_chafa_size_default_terminal():
    assert chafa_size(80, 40) == "38x17"


def test_chafa_size_clamps_small():
    assert chafa_size(10, 5) == "20x10"


def test_chafa_size_clamps_large():
    assert chafa_size(500, 300) == "60x30"


@pytest.mark.parametrize(
    "width,height",
    [(0, 0), (44, 26), (45, 27), (100, 50), (124, 66), (125, 67), (1000, 1000)],
)
def test_chafa_size_within_bounds(width, height):
    w, h = _parse(chafa_size(width, height))
    assert 20 <= w <= 60
    assert 10 <= h <= 30


def test_chafa_size_grows_with_terminal():
    small = _parse(chafa_size(60, 30))
    big = _parse(chafa_size(100, 50))
    assert big[0] >= small[0]
    assert big[1] >= small[1]


def _completed(args, code):
    return subprocess.CompletedProcess(args, code)


@mock.patch("os.get_terminal_size", side_effect=OSError)
def test_display_image_uses_chafa_first(_size, capsys):
    calls = []

    def fake_run(args, check=False):
        calls.append(args)
        return _completed(args, 0)

    with mock.patch("subprocess.run", side_effect=fake_run):
        assert ImageDisplay("15x8").display_image("girl.png") is True
    assert len(calls) == 1
    assert calls[0][0] == "chafa"
    assert calls[0][1:3] == ["--size", chafa_size(80, 40)]
    assert calls[0][-1] == "girl.png"
    assert capsys.readouterr().out == ""


@mock.patch("os.get_terminal_size", side_effect=OSError)
def test_display_image_tries_viewers_in_order(_size, capsys):
    calls = []

    def fake_run(args, check=False):
        calls.append(args)
        return _completed(args, 1)

    with mock.patch("subprocess.run", side_effect=fake_run):
        assert ImageDisplay("15x8").display_image("girl.png") is True

    chafa_sizes = [call[2] for call in calls if call[0] == "chafa"]
    assert chafa_sizes == [chafa_size(80, 40), "15x8", "40", "30"]
    assert calls[4] == ["imgcat", "girl.png"]
    assert calls[5] == ["kitty", "+kitten", "icat", "girl.png"]
    assert len(calls) == 6
    assert "Holding a Programming" in capsys.readouterr().out


@mock.patch("os.get_terminal_size", side_effect=OSError)
def test_display_image_missing_programs_falls_back_to_art(_size, capsys):
    with mock.patch("subprocess.run", side_effect=FileNotFoundError):
        assert ImageDisplay().display_image("girl.png") is True
    out = capsys.readouterr().out
    assert "Anime Girl" in out
    assert out.count("\n") == 10


@mock.patch("os.get_terminal_size", side_effect=OSError)
def test_display_image_stops_at_imgcat(_size):
    calls = []

    def fake_run(args, check=False):
        calls.append(args)
        return _completed(args, 0 if args[0] == "imgcat" else 1)

    with mock.patch("subprocess.run", side_effect=fake_run):
        assert ImageDisplay().display_image("a.jpg") is True
    assert calls[-1] == ["imgcat", "a.jpg"]
    assert not any(call[0] == "kitty" for call in calls)


def test_supported_tools_lists_found_programs():
    found = {"chafa", "kitty"}
    with mock.patch(
        "shutil.which",
        side_effect=lambda name: f"/usr/bin/{name}" if name in found else None,
    ):
        assert ImageDisplay().supported_tools() == ["chafa", "kitty icat"]


def test_supported_tools_empty_when_nothing_found():
    with mock.patch("shutil.which", return_value=None):
        assert ImageDisplay().supported_tools() == []