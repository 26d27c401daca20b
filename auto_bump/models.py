"""Data models for auto-bump.

These Pydantic models describe both sides of the bump configurator: the
narrow, caller-facing request and the fully resolved job spec handed to the
pull-request engine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RepositoryIdentity(BaseModel):
    """The GitHub repository a bump job targets.

    Attributes:
        owner: User or organization that owns the repository.
        repo: Repository name.
    """

    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def parse(cls, slug: str) -> RepositoryIdentity:
        """Build an identity from an ``owner/repo`` string.

        Raises:
            ValueError: If the string is not exactly two non-empty parts.
        """
        owner, sep, repo = slug.strip().partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise ValueError(f"Expected OWNER/REPO, got: {slug!r}")
        return cls(owner=owner, repo=repo)


class BumpHead(BaseModel):
    """Caller-facing head branch options.

    Attributes:
        name: Branch name. $VERSION is substituted by the engine with the
              output of the version command.
        sha: Commit to create the branch from. Defaults to the tip of the
             default branch when unset.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    sha: str | None = None


class PullRequestHead(BaseModel):
    """Head branch descriptor as the engine expects it."""

    name: str
    source: str | None = None


class PullRequestBase(BaseModel):
    """Branch the pull request is opened against."""

    name: str = "master"


class BumpRequest(BaseModel):
    """Options for a bump job. Every field is optional.

    The engine's ``commands``, ``condition`` and ``head`` are owned by the
    configurator and cannot be set here; ``head`` only takes the narrower
    BumpHead shape.
    """

    model_config = ConfigDict(extra="forbid")

    bump_command: str | None = None
    version_command: str | None = None
    title: str | None = None
    body: str | None = None
    head: BumpHead | None = None

    # Passed through to the engine unchanged
    exports: dict[str, str] = Field(default_factory=dict)
    base: PullRequestBase | None = None
    push_only: bool = False
    schedule_expression: str | None = None


class AutoBumpProps(BumpRequest):
    """Bump options plus the repository the job runs against."""

    repo: RepositoryIdentity


class PullRequestSpec(BaseModel):
    """Fully resolved parameters for one pull-request engine job.

    Attributes:
        repo: Target repository.
        head: Branch the bump is committed to.
        base: Branch the pull request targets; engine default when unset.
        title: Pull request title, may contain $VERSION.
        body: Pull request body, may contain $VERSION.
        commands: Shell commands run on the head branch before pushing.
        exports: Variables the engine binds from command output, by name.
        condition: Command whose success makes the engine skip the job.
        push_only: Push the branch without opening a pull request.
        schedule_expression: When the engine should run the job.
    """

    repo: RepositoryIdentity
    head: PullRequestHead
    base: PullRequestBase | None = None
    title: str
    body: str
    commands: list[str]
    exports: dict[str, str] = Field(default_factory=dict)
    condition: str
    push_only: bool = False
    schedule_expression: str | None = None
