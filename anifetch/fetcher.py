"""Download random pictures of anime girls holding programming books."""

from __future__ import annotations

import contextlib
import json
import os
import secrets
import shutil
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any

BASE_URL = "https://api.github.com/repos/cat-milk/Anime-Girls-Holding-Programming-Books/contents"
RAW_BASE_URL = "https://raw.githubusercontent.com/cat-milk/Anime-Girls-Holding-Programming-Books/master"

_IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg")


class FetchError(Exception):
    """Raised when no picture could be obtained."""


class _Unreachable(Exception):
    """The server could not be contacted at all."""


def is_image_name(name: str) -> bool:
    """Tell whether a file name has one of the picture extensions."""
    return name.endswith(_IMAGE_SUFFIXES)


@dataclass(frozen=True)
class GitHubContent:
    """One entry of a repository contents listing."""

    name: str = ""
    path: str = ""
    type: str = ""
    download_url: str = ""

    @classmethod
    def from_json(cls, data: Any) -> GitHubContent:
        """Build an entry from a decoded JSON object."""
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        def field(key: str) -> str:
            value = data.get(key)
            if value is None:
                return ""
            if not isinstance(value, str):
                raise TypeError(f"field {key!r} is not a string")
            return value

        return cls(
            name=field("name"),
            path=field("path"),
            type=field("type"),
            download_url=field("download_url"),
        )


def _auth_headers() -> dict[str, str]:
    token = os.environ.get("GITHUB_TOKEN", "")
    return {"Authorization": f"token {token}"} if token else {}


def _get(url: str, headers: dict[str, str]) -> bytes:
    """Fetch a URL and return its body, whatever the status code."""
    try:
        request = urllib.request.Request(url, headers=headers)
        response = urllib.request.urlopen(request)
    except urllib.error.HTTPError as exc:
        response = exc
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise _Unreachable(str(exc)) from exc
    try:
        with response:
            return response.read()
    except OSError as exc:
        raise FetchError(f"error reading response body: {exc}") from exc


def _decode_listing(body: bytes) -> list[GitHubContent] | None:
    """Decode a contents listing; None if the body is not one."""
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if data is None:
        return []
    if not isinstance(data, list):
        return None
    try:
        return [GitHubContent.from_json(item) for item in data]
    except TypeError:
        return None


class Fetcher:
    """Fetches pictures into a local cache directory."""

    def __init__(self, cache_dir: str) -> None:
        self.cache_dir = cache_dir
        with contextlib.suppress(OSError):
            os.makedirs(cache_dir, mode=0o755, exist_ok=True)

    def random_anime_girl(self) -> str:
        """Download a random picture and return its path in the cache.

        Falls back to an already cached picture when the listing cannot be
        obtained.
        """
        headers = _auth_headers()
        try:
            listing = _decode_listing(_get(BASE_URL, headers))
        except (_Unreachable, FetchError):
            return self._random_cached_image()
        if listing is None:
            return self._random_cached_image()

        directories = [entry for entry in listing if entry.type == "dir"]
        if not directories:
            raise FetchError("no directories found")
        selected_dir = secrets.choice(directories)

        try:
            body = _get(f"{BASE_URL}/{selected_dir.name}", headers)
        except _Unreachable:
            return self._random_cached_image()
        entries = _decode_listing(body)
        if entries is None:
            return self._random_cached_image()

        images = [entry for entry in entries if is_image_name(entry.name)]
        if not images:
            try:
                cached = self.cached_images()
            except OSError:
                cached = []
            if cached:
                return secrets.choice(cached)
            raise FetchError(f"no images found in directory {selected_dir.name}")

        selected = secrets.choice(images)
        cache_path = os.path.join(self.cache_dir, selected.name)
        try:
            data = _get(selected.download_url, {})
        except _Unreachable as exc:
            raise FetchError(f"error downloading image: {exc}") from exc
        try:
            with open(cache_path, "wb") as handle:
                handle.write(data)
        except OSError as exc:
            raise FetchError(f"error creating cache file: {exc}") from exc
        return cache_path

    def cached_images(self) -> list[str]:
        """Return the paths of pictures in the cache, sorted by name."""
        with os.scandir(self.cache_dir) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if not entry.is_dir(follow_symlinks=False) and is_image_name(entry.name)
            )
        return [os.path.join(self.cache_dir, name) for name in names]

    def clear_cache(self) -> None:
        """Remove the cache directory and everything in it."""
        try:
            shutil.rmtree(self.cache_dir)
        except FileNotFoundError:
            pass

    def _random_cached_image(self) -> str:
        try:
            cached = self.cached_images()
        except OSError as exc:
            raise FetchError(f"error getting cached images: {exc}") from exc
        if not cached:
            raise FetchError("no cached images available")
        return secrets.choice(cached)