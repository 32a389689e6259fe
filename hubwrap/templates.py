"""Editor message templates for pull requests and releases."""

from __future__ import annotations

import re

_TRAILING_SPACES = re.compile(r" +$")


def format_commit_logs(cs: str, commit_logs: str) -> str:
    """Comment out every line of the commit logs with the comment string."""
    lines = commit_logs.strip().split("\n")
    return "\n".join(_TRAILING_SPACES.sub("", f"{cs} {line}") for line in lines)


def render_pull_request_tpl(init_msg: str, cs: str, base: str, head: str, commit_logs: str) -> str:
    """The initial editor text for a new pull request."""
    parts = []
    if init_msg:
        parts.append(f"{init_msg}\n")
    parts.append(
        f"\n{cs} Requesting a pull to {base} from {head}\n"
        f"{cs}\n"
        f"{cs} Write a message for this pull request. The first block\n"
        f"{cs} of text is the title and the rest is the description."
    )
    if commit_logs:
        parts.append(f"\n{cs}\n{cs} Changes:\n{cs}\n{format_commit_logs(cs, commit_logs)}")
    return "".join(parts)


def render_release_tpl(
    operation: str, cs: str, tag_name: str, project_name: str, branch_name: str
) -> str:
    """The initial editor text for creating or editing a release."""
    return (
        f"\n{cs} {operation} release {tag_name} for {project_name} from {branch_name}\n"
        f"{cs}\n"
        f"{cs} Write a message for this release. The first block of\n"
        f"{cs} text is the title and the rest is the description."
    )