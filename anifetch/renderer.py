"""Printing system facts next to a picture."""

from __future__ import annotations

import sys

from anifetch.image import ImageDisplay
from anifetch.system import SystemInfo

_RESET = "\033[0m"
_BOLD = "\033[1m"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_BLUE = "\033[34m"

_ASCII_ART = (
    "\n"
    "    ╭─────────────────────────╮\n"
    "    │      (◕‿◕)             │\n"
    "    │      /|\\\\               │\n"
    "    │     / \\\\                │\n"
    "    │                         │\n"
    "    │   Holding a Programming │\n"
    "    │   Book! 📚              │\n"
    "    │                         │\n"
    "    │   🎀  Anime Girl  🎀    │\n"
    "    ╰─────────────────────────╯\n"
)

_INLINE_IMAGE = "\033]1337;File=inline=1;preserveAspectRatio=1:{path}\007"


def format_info(info: SystemInfo) -> str:
    """Return the coloured block of system facts, one line per fact."""
    lines = [
        f"{_BOLD}{_GREEN}{info.hostname}@{_RESET}{_BOLD} {_BLUE}{info.os}{_RESET}",
        f"{_BOLD}{_GREEN}────────{_RESET} {_BOLD}{_BLUE}────",
    ]
    fields = (
        ("OS", info.os),
        ("Kernel", info.kernel),
        ("Uptime", info.uptime),
        ("Packages", info.packages),
        ("Shell", info.shell),
        ("CPU", info.cpu),
        ("Memory", info.memory),
        ("Disk", info.disk),
    )
    lines.extend(
        f"{_BOLD}{label}:{_RESET} {_YELLOW}{value}{_RESET}" for label, value in fields
    )
    return "".join(f"{line}\n" for line in lines)


class Renderer:
    """Writes the picture and the system facts to the terminal."""

    def __init__(self, show_image: bool = True, image_size: str = "40x20") -> None:
        self.show_image = show_image
        self.image_size = image_size

    def display_info(self, info: SystemInfo, anime_girl_path: str = "") -> None:
        """Show the picture (or a drawing) followed by the system facts."""
        if self.show_image:
            if not anime_girl_path or not self._display_image(anime_girl_path):
                self._display_ascii_art()
        sys.stdout.write(format_info(info))
        sys.stdout.flush()

    def _display_image(self, image_path: str) -> bool:
        if ImageDisplay(self.image_size).display_image(image_path):
            return True
        sys.stdout.write(_INLINE_IMAGE.format(path=image_path))
        return True

    def _display_ascii_art(self) -> None:
        sys.stdout.write(_ASCII_ART)

    def display_error(self, message: str) -> None:
        """Print an error message in red on standard error."""
        print(f"{_RED}Error: {message}{_RESET}", file=sys.stderr)

    def display_success(self, message: str) -> None:
        """Print a message in green on standard output."""
        print(f"{_GREEN}{message}{_RESET}")