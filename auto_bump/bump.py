"""Bump configurator: turn a partial BumpRequest into a full job spec.

Resolution happens in two passes:
1. Defaults - each field takes the caller's value if set, else the value
   from DEFAULTS.
2. Composition - the body is derived from the resolved branch name, and the
   head, command list, exports and gating condition are assembled.

$VERSION is never substituted here. The engine binds it at run time from the
output of the version command, which is exported under the VERSION key.
"""

from __future__ import annotations

from pydantic import BaseModel

from .models import (
    AutoBumpProps,
    BumpRequest,
    PullRequestHead,
    PullRequestSpec,
    RepositoryIdentity,
)
from .pr import AutoPullRequest
from .tree import Scope

VERSION_EXPORT = "VERSION"

# Skip the job when master is already tagged (already released).
RELEASE_CONDITION = "git describe --exact-match master"

# Request fields copied to the spec as-is. Exports are merged separately.
PASSTHROUGH_FIELDS = {"base", "push_only", "schedule_expression"}


class BumpDefaults(BaseModel):
    """Values used for any option the caller leaves unset."""

    branch: str = "bump/$VERSION"
    bump_command: str = "/bin/sh ./bump.sh"
    version_command: str = "git describe"
    title: str = "chore(release): $VERSION"


DEFAULTS = BumpDefaults()


class ResolvedBump(BaseModel):
    """Request options after defaulting, before composition.

    ``body`` stays None when the caller did not provide one; it is derived
    from the resolved branch during composition.
    """

    branch: str
    source: str | None = None
    bump_command: str
    version_command: str
    title: str
    body: str | None = None


def _first(value: str | None, default: str) -> str:
    return default if value is None else value


def resolve_defaults(
    request: BumpRequest, defaults: BumpDefaults = DEFAULTS
) -> ResolvedBump:
    """Resolve every option independently against ``defaults``."""
    # head may be any shape when validation was bypassed; only name and sha count
    head = request.head
    return ResolvedBump(
        branch=_first(getattr(head, "name", None), defaults.branch),
        source=getattr(head, "sha", None),
        bump_command=_first(request.bump_command, defaults.bump_command),
        version_command=_first(request.version_command, defaults.version_command),
        title=_first(request.title, defaults.title),
        body=request.body,
    )


def changelog_link(repo: RepositoryIdentity, branch: str) -> str:
    """Markdown link to CHANGELOG.md on ``branch``."""
    return (
        f"See [CHANGELOG](https://github.com/{repo.owner}/{repo.repo}"
        f"/blob/{branch}/CHANGELOG.md)"
    )


def compute_bump_spec(
    request: BumpRequest, repo: RepositoryIdentity
) -> PullRequestSpec:
    """Build the pull-request engine spec for a bump job.

    Pure: the request is only read, and the returned spec shares no mutable
    state with it.

    Args:
        request: Caller options; unset fields fall back to DEFAULTS.
        repo: Repository the job targets, used for the default body link.

    Returns:
        A spec with exactly one command, a VERSION export bound to the
        version command, and the fixed release condition.
    """
    resolved = resolve_defaults(request)

    body = resolved.body
    if body is None:
        body = changelog_link(repo, resolved.branch)

    passthrough = request.model_dump(include=PASSTHROUGH_FIELDS)
    return PullRequestSpec(
        **passthrough,
        repo=repo.model_copy(),
        head=PullRequestHead(name=resolved.branch, source=resolved.source),
        title=resolved.title,
        body=body,
        commands=[resolved.bump_command],
        exports={**request.exports, VERSION_EXPORT: resolved.version_command},
        condition=RELEASE_CONDITION,
    )


class AutoBump:
    """A bump job node in a job tree.

    Computes the bump spec on construction, wraps it in an AutoPullRequest
    and registers itself under ``node_id`` in ``scope``.

    Attributes:
        node_id: Name of this node within its scope.
        pr: The underlying pull-request job.
    """

    def __init__(self, scope: Scope, node_id: str, props: AutoBumpProps) -> None:
        self.node_id = node_id
        self.pr = AutoPullRequest(compute_bump_spec(props, props.repo))
        scope.add(node_id, self)
