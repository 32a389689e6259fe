"""Update checks: timestamps, downloads and unpacking of release archives."""

from __future__ import annotations

import os
import random
import tempfile
import urllib.error
import urllib.request
import zipfile
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

HUB_AUTO_UPDATE_CONFIG = "hub.autoUpdate"

_ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


class UpdateError(Exception):
    """An update could not be downloaded or unpacked."""


def rand_duration(n: timedelta) -> timedelta:
    """A random duration in [0, n); n must be positive."""
    micros = int(n / timedelta(microseconds=1))
    if micros <= 0:
        raise ValueError("duration must be positive")
    return timedelta(microseconds=random.randrange(micros))


def _parse_rfc3339(text: str) -> datetime:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError("timestamp has no time zone")
    return parsed


def read_time(path) -> datetime:
    """The timestamp stored at path.

    A missing file or an unparsable timestamp gives the earliest time; any other
    read error gives a time far in the future so no update is attempted.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            content = fh.read()
    except FileNotFoundError:
        return _ZERO_TIME
    except OSError:
        return datetime.now(timezone.utc) + timedelta(hours=1000)
    try:
        return _parse_rfc3339(content.strip())
    except ValueError:
        return _ZERO_TIME


def write_time(path, t: datetime) -> bool:
    """Store t at path; report whether that worked."""
    if t.tzinfo is None:
        t = t.astimezone()
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(t.isoformat(timespec="seconds"))
    except OSError:
        return False
    return True


@dataclass
class Updater:
    """Where to look for updates, what version is running and when to check."""

    host: str = ""
    current_version: str = ""
    timestamp_path: str = ""

    def time_to_update(self) -> bool:
        """Whether a check is due; if so, schedule the next one in about 14 days."""
        now = datetime.now(timezone.utc)
        if self.current_version == "dev" or read_time(self.timestamp_path) > now:
            return False
        wait = timedelta(days=13) + rand_duration(timedelta(days=1))
        return write_time(self.timestamp_path, now + wait)


def download_file(url: str) -> str:
    """Download url into a fresh temporary directory and return the file's path."""
    directory = tempfile.mkdtemp(prefix="gh-update")
    try:
        with urllib.request.urlopen(url) as resp:
            status = resp.status
            if not 200 <= status < 300:
                raise UpdateError(f"Can't download {url}: {status}")
            dest = os.path.join(directory, os.path.basename(url))
            with open(dest, "wb") as fh:
                while chunk := resp.read(64 * 1024):
                    fh.write(chunk)
    except urllib.error.HTTPError as err:
        raise UpdateError(f"Can't download {url}: {err.code}") from err
    return dest


def _unzip_file(archive: zipfile.ZipFile, info: zipfile.ZipInfo, to: str) -> str:
    dest = os.path.join(to, os.path.basename(info.filename))
    try:
        src = archive.open(info)
    except (OSError, zipfile.BadZipFile) as err:
        raise UpdateError(f"Can't open zip entry {info.filename} when reading: {err}") from err
    copied = 0
    with src, open(dest, "wb") as out:
        while chunk := src.read(64 * 1024):
            out.write(chunk)
            copied += len(chunk)
    if copied != info.file_size:
        raise UpdateError(f"Zip entry {info.filename} is corrupted")
    return dest


def unzip_executable(path) -> str:
    """Extract the first entry named gh* next to the archive and return its path."""
    path = os.fspath(path)
    try:
        archive = zipfile.ZipFile(path)
    except (OSError, zipfile.BadZipFile) as err:
        raise UpdateError(f"Can't open zip file {path}: {err}") from err
    with archive:
        for info in archive.infolist():
            if info.filename.startswith("gh"):
                return _unzip_file(archive, info, os.path.dirname(path))
    raise UpdateError(f"No gh executable is found in {path}")