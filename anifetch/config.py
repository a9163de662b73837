"""User configuration for anifetch."""

from __future__ import annotations

import os
from dataclasses import dataclass

_CACHE_DIR_NAME = ".anifetch"


@dataclass
class Config:
    """Settings that control where images are cached and how they are shown."""

    cache_dir: str
    show_image: bool = True
    image_width: int = 200
    image_height: int = 200

    def ensure_cache_dir(self) -> None:
        """Create the cache directory if it does not exist yet."""
        os.makedirs(self.cache_dir, mode=0o755, exist_ok=True)


def _home_dir() -> str:
    home = os.path.expanduser("~")
    if home == "~":
        home = os.environ.get("HOME", "")
    return home


def default_config() -> Config:
    """Return the configuration used when nothing else is specified."""
    return Config(cache_dir=os.path.join(_home_dir(), _CACHE_DIR_NAME))