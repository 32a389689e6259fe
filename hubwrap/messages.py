"""Reading titles and bodies of messages, and small filesystem checks."""

from __future__ import annotations

import os
import sys


def read_msg(message: str) -> tuple[str, str]:
    """Split a message into a one-line title and a body at the first blank line."""
    parts = message.split("\n\n", 1)
    title = parts[0].replace("\n", " ").strip()
    body = parts[1].strip() if len(parts) > 1 else ""
    return title, body


def read_msg_from_file(filename: str) -> tuple[str, str]:
    """Read a message from a file, or from standard input when filename is "-"."""
    if filename == "-":
        content = sys.stdin.read()
    else:
        with open(filename, encoding="utf-8", newline="") as fh:
            content = fh.read()
    return read_msg(content.replace("\r\n", "\n"))


def get_title_and_body_from_flags(message_flag: str, file_flag: str) -> tuple[str, str]:
    """Title and body from a message flag, else a file flag, else empty."""
    if message_flag:
        return read_msg(message_flag)
    if file_flag:
        return read_msg_from_file(file_flag)
    return "", ""


def is_empty_dir(path) -> bool:
    """Whether path holds no entries; a missing path counts as empty."""
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except OSError:
        return True