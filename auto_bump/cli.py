"""CLI entry point for auto-bump."""

from __future__ import annotations

from pathlib import Path

import click
from tomlkit.exceptions import TOMLKitError

from .bump import compute_bump_spec
from .models import BumpHead, BumpRequest, RepositoryIdentity
from .pr import AutoPullRequest
from .shell import infer_repository
from .toml import (
    ConfigError,
    get_repo,
    load_bump_request,
    load_pyproject,
    save_pyproject,
    write_default_table,
)


def _parse_exports(values: tuple[str, ...]) -> dict[str, str]:
    exports: dict[str, str] = {}
    for value in values:
        name, sep, command = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"Expected KEY=COMMAND, got: {value!r}", param_hint="--export"
            )
        exports[name] = command
    return exports


@click.group()
@click.version_option(package_name="auto-bump")
def cli() -> None:
    """Configure version-bump pull request jobs."""


@cli.command()
@click.option(
    "--pyproject",
    type=click.Path(dir_okay=False, path_type=Path),
    default="pyproject.toml",
    show_default=True,
    help="pyproject.toml holding a [tool.auto-bump] table.",
)
@click.option("--repo", "repo_slug", metavar="OWNER/REPO", help="Target repository.")
@click.option("--bump-command", help="Command that bumps the version.")
@click.option("--version-command", help="Command that prints the current version.")
@click.option("--title", help="Pull request title.")
@click.option("--body", help="Pull request body.")
@click.option("--branch", help="Head branch name.")
@click.option("--sha", help="Commit to create the head branch from.")
@click.option(
    "-e",
    "--export",
    "export_values",
    multiple=True,
    metavar="KEY=COMMAND",
    help="Extra exported variable (repeatable).",
)
def show(
    pyproject: Path,
    repo_slug: str | None,
    bump_command: str | None,
    version_command: str | None,
    title: str | None,
    body: str | None,
    branch: str | None,
    sha: str | None,
    export_values: tuple[str, ...],
) -> None:
    """Print the resolved bump job spec as JSON.

    Options given on the command line override the [tool.auto-bump] table.
    """
    request = BumpRequest()
    repo: RepositoryIdentity | None = None
    if pyproject.exists():
        try:
            doc = load_pyproject(pyproject)
            request = load_bump_request(doc)
            if not repo_slug:
                repo = get_repo(doc)
        except (ConfigError, TOMLKitError) as exc:
            raise click.ClickException(f"{pyproject}: {exc}") from exc

    if repo_slug:
        try:
            repo = RepositoryIdentity.parse(repo_slug)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--repo") from exc
    if repo is None:
        repo = infer_repository()
    if repo is None:
        raise click.ClickException(
            "Could not determine the repository. Pass --repo OWNER/REPO or set\n"
            'repo = "OWNER/REPO" in [tool.auto-bump].'
        )

    overrides = {
        "bump_command": bump_command,
        "version_command": version_command,
        "title": title,
        "body": body,
    }
    update = {key: value for key, value in overrides.items() if value is not None}
    if branch is not None or sha is not None:
        head = request.head or BumpHead()
        update["head"] = BumpHead(
            name=head.name if branch is None else branch,
            sha=head.sha if sha is None else sha,
        )
    if export_values:
        update["exports"] = {**request.exports, **_parse_exports(export_values)}
    request = request.model_copy(update=update)

    pr = AutoPullRequest(compute_bump_spec(request, repo))
    click.echo(pr.to_json())


@cli.command()
@click.option(
    "--pyproject",
    type=click.Path(dir_okay=False, path_type=Path),
    default="pyproject.toml",
    show_default=True,
    help="pyproject.toml to add the [tool.auto-bump] table to.",
)
def init(pyproject: Path) -> None:
    """Write the default [tool.auto-bump] table into pyproject.toml."""
    if not pyproject.exists():
        raise click.ClickException(f"No {pyproject} found.")

    try:
        doc = load_pyproject(pyproject)
        added = write_default_table(doc)
    except (ConfigError, TOMLKitError) as exc:
        raise click.ClickException(f"{pyproject}: {exc}") from exc
    if not added:
        raise click.ClickException(f"{pyproject} already has a [tool.auto-bump] table.")
    save_pyproject(pyproject, doc)

    click.echo(f"✓ Wrote [tool.auto-bump] to {pyproject}")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Set repo = \"OWNER/REPO\" unless it can be read from the origin remote")
    click.echo("  2. Review the job spec:")
    click.echo("       auto-bump show")
