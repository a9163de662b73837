"""Collection of basic facts about the running system."""

from __future__ import annotations

import os
import platform
import re
import socket
import subprocess
import sys
from dataclasses import dataclass

_PACKAGE_MANAGERS = (
    (("pacman", "-Qq"), "pacman"),
    (("dpkg", "-l"), "dpkg"),
    (("rpm", "-qa"), "rpm"),
    (("brew", "list"), "brew"),
    (("nix-store", "-qR"), "nix"),
)

_MEMTOTAL = re.compile(r"^MemTotal:\s*(\d+)")
_MEMAVAILABLE = re.compile(r"^MemAvailable:\s*(\d+)")


@dataclass
class SystemInfo:
    """Facts shown next to the picture; empty strings mean unknown."""

    os: str = ""
    kernel: str = ""
    hostname: str = ""
    uptime: str = ""
    packages: str = ""
    shell: str = ""
    cpu: str = ""
    memory: str = ""
    disk: str = ""


def _run(*args: str) -> str | None:
    """Run a command and return its standard output, or None if it failed."""
    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            errors="replace",
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return result.stdout


def _is_linux() -> bool:
    return sys.platform.startswith("linux")


def get_system_info() -> SystemInfo:
    """Gather everything that anifetch displays."""
    info = SystemInfo(os=platform.system().lower())

    kernel = _run("uname", "-r")
    if kernel is not None:
        info.kernel = kernel.strip()

    try:
        info.hostname = socket.gethostname()
    except OSError:
        pass

    uptime = _run("uptime", "-p")
    if uptime is not None:
        info.uptime = uptime.strip()

    info.packages = get_package_count()

    shell = os.environ.get("SHELL", "")
    if shell:
        info.shell = os.path.basename(shell.rstrip("/")) or "/"

    info.cpu = get_cpu_info()
    info.memory = get_memory_info()
    info.disk = get_disk_info()
    return info


def get_package_count() -> str:
    """Count installed packages with the first package manager that answers."""
    for command, name in _PACKAGE_MANAGERS:
        output = _run(*command)
        if output is None:
            continue
        lines = output.strip().split("\n")
        if lines[0]:
            return f"{len(lines)} ({name})"
    return "unknown"


def parse_cpu_model(text: str) -> str | None:
    """Return the first CPU model name found in /proc/cpuinfo text."""
    for line in text.split("\n"):
        if line.startswith("model name"):
            parts = line.split(":")
            if len(parts) > 1:
                return parts[1].strip()
    return None


def parse_meminfo(text: str) -> str | None:
    """Summarise /proc/meminfo text as used and total MiB."""
    total = available = 0
    for line in text.split("\n"):
        match = _MEMTOTAL.match(line)
        if match:
            total = int(match.group(1))
        match = _MEMAVAILABLE.match(line)
        if match:
            available = int(match.group(1))
    if total <= 0:
        return None
    used = max(total - available, 0)
    return f"{used // 1024}MiB / {total // 1024}MiB"


def parse_df(output: str) -> str | None:
    """Return "used / size" from the first data row of `df -h` output."""
    lines = output.split("\n")
    if len(lines) < 2:
        return None
    fields = lines[1].split()
    if len(fields) < 5:
        return None
    return f"{fields[2]} / {fields[1]}"


def _read_text(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return None


def get_cpu_info() -> str:
    """Return the CPU model name, or "Unknown CPU"."""
    if _is_linux():
        text = _read_text("/proc/cpuinfo")
        if text is not None:
            model = parse_cpu_model(text)
            if model is not None:
                return model
    return "Unknown CPU"


def get_memory_info() -> str:
    """Return memory usage, or "Unknown"."""
    if _is_linux():
        text = _read_text("/proc/meminfo")
        if text is not None:
            summary = parse_meminfo(text)
            if summary is not None:
                return summary
    return "Unknown"


def get_disk_info() -> str:
    """Return root filesystem usage, or "Unknown"."""
    if _is_linux():
        output = _run("df", "-h", "/")
        if output is not None:
            summary = parse_df(output)
            if summary is not None:
                return summary
    return "Unknown"