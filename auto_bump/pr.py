"""Pull-request engine job node.

AutoPullRequest is the hand-off point to the external engine: it holds a
resolved PullRequestSpec and serializes it. Running commands, evaluating the
condition and talking to GitHub all happen on the engine side.
"""

from __future__ import annotations

import json
from typing import Any

from .models import PullRequestSpec


class AutoPullRequest:
    """A single pull-request engine job."""

    def __init__(self, spec: PullRequestSpec) -> None:
        self.spec = spec

    @property
    def head_branch(self) -> str:
        return self.spec.head.name

    @property
    def version_command(self) -> str | None:
        """Command whose output the engine binds to $VERSION, if exported."""
        return self.spec.exports.get("VERSION")

    def to_dict(self) -> dict[str, Any]:
        """Spec as plain data, with unset optional fields dropped."""
        return self.spec.model_dump(exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return f"AutoPullRequest(repo={self.spec.repo.slug!r}, head={self.head_branch!r})"
