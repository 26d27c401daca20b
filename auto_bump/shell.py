"""Git helpers used to fill in defaults from the local checkout.

Only the CLI calls into this module; the bump configurator itself never
touches git.
"""

from __future__ import annotations

import re
import subprocess

from .models import RepositoryIdentity

# https://github.com/owner/repo(.git) and git@github.com:owner/repo(.git)
_REMOTE_RE = re.compile(
    r"^(?:https?://(?:[^@/]+@)?github\.com/|ssh://git@github\.com/|git@github\.com:)"
    r"(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"
)


def git(*args: str, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "remote", "get-url", "origin").
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail (e.g., no remote).

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=check)
    return result.stdout.strip()


def parse_remote_url(url: str) -> RepositoryIdentity | None:
    """Extract owner/repo from a GitHub remote URL, or None if it isn't one."""
    match = _REMOTE_RE.match(url.strip())
    if not match:
        return None
    return RepositoryIdentity(owner=match["owner"], repo=match["repo"])


def infer_repository(remote: str = "origin") -> RepositoryIdentity | None:
    """Look up the repository identity from a git remote of the current checkout."""
    url = git("remote", "get-url", remote, check=False)
    if not url:
        return None
    return parse_remote_url(url)
