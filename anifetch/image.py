"""Showing pictures in the terminal with whatever viewer is available."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys

_DEFAULT_TERMINAL_SIZE = (80, 40)

_CHAFA_OPTIONS = ("--symbols", "block", "--colors", "256", "--dither", "none")

_FALLBACK_ART = (
    "╭─────────────────────────╮",
    "│      (◕‿◕)            │",
    "│       /|\\             │",
    "│      / \\              │",
    "│                        │",
    "│  Holding a Programming │",
    "│      Book! 📚          │",
    "│                        │",
    "│  🎀 Anime Girl 🎀      │",
    "╰─────────────────────────╯",
)


def chafa_size(width: int, height: int) -> str:
    """Return the chafa size for a terminal of the given columns and rows.

    The picture takes about half of the terminal, kept between 20x10 and 60x30.
    """
    display_width = min(max((width - 4) // 2, 20), 60)
    display_height = min(max((height - 6) // 2, 10), 30)
    return f"{display_width}x{display_height}"


def _terminal_size() -> tuple[int, int]:
    for stream in (sys.stdin, sys.stdout):
        try:
            size = os.get_terminal_size(stream.fileno())
        except (OSError, ValueError, AttributeError):
            continue
        return size.columns, size.lines
    return _DEFAULT_TERMINAL_SIZE


def _run(args: list[str]) -> bool:
    """Run a viewer attached to this terminal; True if it succeeded."""
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        result = subprocess.run(args, check=False)
    except OSError:
        return False
    return result.returncode == 0


class ImageDisplay:
    """Displays a picture with chafa, imgcat or kitty, or a text drawing."""

    def __init__(self, size: str = "15x8") -> None:
        self.size = size

    def display_image(self, image_path: str) -> bool:
        """Show the picture, trying each viewer in order of preference."""
        return (
            self._try_chafa(image_path)
            or self._try_imgcat(image_path)
            or self._try_kitty_icat(image_path)
            or self._show_fallback_art()
        )

    def _try_chafa(self, image_path: str) -> bool:
        sizes = (chafa_size(*_terminal_size()), self.size, "40", "30")
        return any(
            _run(["chafa", "--size", size, *_CHAFA_OPTIONS, image_path])
            for size in sizes
        )

    def _try_imgcat(self, image_path: str) -> bool:
        return _run(["imgcat", image_path])

    def _try_kitty_icat(self, image_path: str) -> bool:
        return _run(["kitty", "+kitten", "icat", image_path])

    def _show_fallback_art(self) -> bool:
        print("\n".join(_FALLBACK_ART))
        return True

    def supported_tools(self) -> list[str]:
        """Return the names of the picture viewers found on the PATH."""
        candidates = (("chafa", "chafa"), ("imgcat", "imgcat"), ("kitty", "kitty icat"))
        return [label for program, label in candidates if shutil.which(program)]