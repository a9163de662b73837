[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anifetch"
version = "0.1.0"
description = "System information fetcher that shows an anime girl holding a programming book"
requires-python = ">=3.10"
dependencies = []
keywords = ["fetch", "system-info", "terminal", "anime", "chafa"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["anifetch"]

[tool.pytest.ini_options]
addopts = "-ra"
