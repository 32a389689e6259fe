"""Building blocks for a git wrapper: argument parsing, rewriting, help and a shell alias helper."""

__version__ = "0.1.0"

__all__ = [
    "alias",
    "args",
    "cmd",
    "commands",
    "flags",
    "help",
    "messages",
    "runner",
    "templates",
    "transforms",
    "updater",
]