# anifetch

A small system-information library for the terminal. Next to the usual
details (OS, kernel, uptime, packages, shell, CPU, memory, disk), it shows
a random picture of an anime girl holding a programming book. The pictures
come from a public collection on GitHub and are cached locally.

It uses only the Python standard library and needs Python 3.10 or later.

## What it shows

`anifetch.system.get_system_info()` returns a `SystemInfo` dataclass with
these fields, each a string:

- `os`: the platform name in lower case, such as `linux` or `darwin`
- `kernel`: output of `uname -r`
- `hostname`
- `uptime`: output of `uptime -p`
- `packages`: counted with the first package manager that answers, in this
  order: pacman, dpkg, rpm, brew, nix (`nix-store -qR`); shown as
  `"<count> (<manager>)"`
- `shell`: the last part of `$SHELL`
- `cpu`: model name from `/proc/cpuinfo` (Linux only)
- `memory`: `"<used>MiB / <total>MiB"` from `/proc/meminfo` (Linux only)
- `disk`: `"<used> / <size>"` for `/` from `df -h` (Linux only)

Kernel, hostname, uptime and shell are left empty when they cannot be
found. Packages falls back to `unknown`, CPU to `Unknown CPU`, memory and
disk to `Unknown`.

The parsers are available on their own: `parse_cpu_model(text)`,
`parse_meminfo(text)` and `parse_df(output)` each return a string, or `None`
when the input holds nothing usable.

## Showing the picture

`anifetch.image.ImageDisplay(size)` draws a picture with the first tool
that works:

1. `chafa`, first sized to about half of the terminal (see
   `chafa_size(width, height)`, which keeps the result between `20x10` and
   `60x30`), then at `size` (default `15x8`), then at `40` and `30`
2. `imgcat`
3. `kitty +kitten icat`

If none of them succeeds, a small text card is printed instead.
`ImageDisplay.supported_tools()` lists which of `chafa`, `imgcat` and
`kitty icat` are found on the `PATH`.

## Usage

```python
from anifetch.config import default_config
from anifetch.fetcher import Fetcher, FetchError
from anifetch.renderer import Renderer
from anifetch.system import get_system_info

config = default_config()          # cache in ~/.anifetch
config.ensure_cache_dir()

fetcher = Fetcher(config.cache_dir)
renderer = Renderer(show_image=config.show_image, image_size="40x20")

try:
    image_path = fetcher.random_anime_girl()
except FetchError as exc:
    renderer.display_error(str(exc))
    image_path = ""

renderer.display_info(get_system_info(), image_path)
```

### Configuration

`default_config()` returns a `Config` dataclass with `cache_dir` set to
`~/.anifetch`, `show_image=True`, `image_width=200` and `image_height=200`.
`Config.ensure_cache_dir()` creates the cache directory if needed.

### Fetching pictures

`Fetcher(cache_dir)` creates the cache directory if it can.
`Fetcher.random_anime_girl()` picks a random language directory in the
collection, then a random `.png`, `.jpg` or `.jpeg` in it, downloads it into
the cache and returns its path. A random picture already in the cache is
returned instead when:

- GitHub cannot be reached, or its answer is not a contents listing (for
  example a rate-limit error message);
- the chosen directory holds no pictures.

`FetchError` is raised when the listing holds no directories, when a
fallback is needed but the cache is empty or unreadable, when the download
cannot be started, or when the cache file cannot be written.

Set the `GITHUB_TOKEN` environment variable to send authenticated API
requests and get a higher rate limit.

- `Fetcher.cached_images()` returns the paths of pictures in the cache,
  sorted by name.
- `Fetcher.clear_cache()` removes the cache directory and everything in it.
- `is_image_name(name)` tells whether a file name ends in `.png`, `.jpg` or
  `.jpeg`.

### Rendering

`Renderer(show_image=True, image_size="40x20")`:

- `display_info(info, anime_girl_path="")` shows the picture (or, with no
  path, a text drawing) when `show_image` is true, then the coloured block
  of system facts.
- `display_error(message)` prints `Error: <message>` in red on standard
  error.
- `display_success(message)` prints the message in green.

`format_info(info)` returns the coloured block of facts without printing it.

## What it does not do

There is no `anifetch` command and no command-line options: the package is
a library, and a script that wants the fetch output calls it as shown above.
Settings are not read from a file; `Config` holds them only in memory.

## Running the tests

```
pip install -e ".[test]"
pytest
```