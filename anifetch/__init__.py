"""System facts for the terminal, shown next to a random anime girl holding a programming book."""

__version__ = "0.1.0"