"""Argument rewriting for hub's extensions to git commands."""

from __future__ import annotations

import re
from urllib.parse import quote_plus

from hubwrap.args import Args
from hubwrap.commands import NAME_RE, OWNER_RE

_SHA_OR_TAG = rf"((?:{OWNER_RE}:)?\w[\w.-]+\w)"
_SHA_OR_TAG_RANGE = re.compile(rf"^{_SHA_OR_TAG}\.\.{_SHA_OR_TAG}$", re.ASCII)

_OWNER_ONLY = re.compile(rf"^({OWNER_RE})$", re.ASCII)
_OWNER_AND_NAME = re.compile(rf"^({OWNER_RE})\/({NAME_RE})$", re.ASCII)

_REMOTE_NAMES = re.compile(r"^\w+(,\w+)$", re.ASCII)

# Characters allowed to stay unencoded in compare views.
_COMPARE_UNESCAPES = {
    "%2F": "/",
    "%3A": ":",
    "%5E": "^",
    "%7E": "~",
    "%2A": "*",
    "%21": "!",
}
_COMPARE_UNESCAPE_RE = re.compile("|".join(re.escape(k) for k in _COMPARE_UNESCAPES))


class CheckoutError(ValueError):
    """Flags that cannot be combined with checking out a pull request."""


def parse_compare_range(r: str) -> str:
    """Turn a two-dot range "A..B" into the three-dot form "A...B"."""
    return _SHA_OR_TAG_RANGE.sub(r"\1...\2", r)


def range_query_escape(r: str) -> str:
    """Escape a compare range for a URL, keeping ranges and a few characters as is."""
    if ".." in r:
        return r
    escaped = quote_plus(r, safe="")
    return _COMPARE_UNESCAPE_RE.sub(lambda m: _COMPARE_UNESCAPES[m.group(0)], escaped)


def parse_repo_name_owner(name_with_owner: str) -> tuple[str, str]:
    """Split "OWNER" or "OWNER/NAME" into (owner, name); ("", "") if neither."""
    match = _OWNER_ONLY.match(name_with_owner)
    if match:
        return match.group(1), ""
    match = _OWNER_AND_NAME.match(name_with_owner)
    if match:
        return match.group(1), match.group(2)
    return "", ""


def parse_remote_names(args: Args) -> list[str]:
    """Remote names given to fetch; "a,b" is expanded into "--multiple a b"."""
    words = args.words()
    if args.index_of_param("--multiple") != -1:
        return words if args.params_size() > 1 else []
    if not words:
        return []

    remote_name = words[0]
    if _REMOTE_NAMES.match(remote_name):
        i = args.index_of_param(remote_name)
        args.remove_param(i)
        names = remote_name.split(",")
        args.insert_param(i, *names)
        args.insert_param(i, "--multiple")
        return names
    return [remote_name]


def sanitize_checkout_flags(args: Args) -> None:
    """Reject flags that make no sense when checking out a pull request."""
    if args.index_of_param("-b") != -1:
        raise CheckoutError("Unsupported flag -b when checking out pull request")
    if args.index_of_param("--orphan") != -1:
        raise CheckoutError("Unsupported flag --orphan when checking out pull request")


def replace_checkout_param(args: Args, checkout_url: str, branch_name: str, remote_name: str) -> None:
    """Replace the pull request URL with a tracking branch checkout."""
    idx = args.index_of_param(checkout_url)
    args.remove_param(idx)
    args.insert_param(idx, "--track", "-B", branch_name, remote_name)


def _take_flag(args: Args, flag: str) -> bool:
    i = args.index_of_param(flag)
    if i == -1:
        return False
    args.remove_param(i)
    return True


def parse_clone_private_flag(args: Args) -> bool:
    """Remove "-p" from the params and report whether it was there."""
    return _take_flag(args, "-p")


def parse_clone_name_and_owner(arg: str) -> tuple[str, str]:
    """Split "[OWNER/]NAME" into (name, owner); owner is "" when absent."""
    if "/" in arg:
        owner, name = arg.split("/", 1)
        return name, owner
    return arg, ""


def parse_remote_private_flag(args: Args) -> bool:
    """Remove "-p" from the params and report whether it was there."""
    return _take_flag(args, "-p")


def parse_init_flag(args: Args) -> bool:
    """Remove "-g" from the params and report whether it was there."""
    return _take_flag(args, "-g")