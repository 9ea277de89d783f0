"""Defines the Command Line Interface (CLI) using Typer."""

from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer import Option
from typing_extensions import Annotated

from changelog_manager.changelog.exceptions import ChangelogError
from changelog_manager.changelog.inspector import ChangelogInspector
from changelog_manager.changelog.models import AddEntryStatus, IssueCategory
from changelog_manager.changelog.storage import read_changelog
from changelog_manager.changelog.template import ChangelogTemplateModel, create_changelog
from changelog_manager.changelog.workflow import run_add_entry_workflow
from changelog_manager.configuration.driver import get_add_entry_config, get_inspect_config
from changelog_manager.configuration.exceptions import InvalidConfigurationElementError, RequiredConfigurationElementError
from changelog_manager.utils.logging_config import configure_logging
from changelog_manager.utils.prompts import collect_entry

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


def main_callback(
    ctx: typer.Context,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Add entries to the Unpublished section of a changelog."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    configure_logging(debug)


typer_app.callback()(main_callback)


@typer_app.command(name="add-entry")
def add_entry_cli(
    ctx: typer.Context,
    changelog_path: Annotated[Path | None, Option(envvar="CHANGELOG_PATH", help="Path to the changelog document.")] = None,
    ticket: Annotated[str | None, Option(help="Issue ticket identifier, e.g. ABC-1234.")] = None,
    pull_request: Annotated[str | None, Option(help="Pull request number.")] = None,
    message: Annotated[str | None, Option(help="Changelog message (at most 50 characters).")] = None,
    category: Annotated[IssueCategory | None, Option(case_sensitive=False, help="Category of the change.")] = None,
    title_token: Annotated[str | None, Option(envvar="CHANGELOG_TITLE_TOKEN", help="Word identifying the changelog title.")] = None,
    dry_run: Annotated[bool, Option(help="Print the updated changelog instead of writing it.")] = False,
) -> None:
    """Add an entry to the matching category section of the Unpublished changes.

    Any entry field not given as an option is prompted for interactively.
    """
    try:
        config = get_add_entry_config(debug=ctx.obj["debug"], changelog_path=changelog_path, title_token=title_token, dry_run=dry_run)
    except (RequiredConfigurationElementError, InvalidConfigurationElementError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    if not config.changelog_path.is_file():
        typer.echo(f"Changelog not found: {config.changelog_path.absolute()}", err=True)
        raise typer.Exit(1)

    try:
        entry = collect_entry(ticket_id=ticket, pull_request_id=pull_request, message=message, category=category)
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            typer.echo(f"Invalid changelog entry field '{field}': {error['msg']}", err=True)
        raise typer.Exit(1) from exc

    try:
        result = run_add_entry_workflow(
            changelog_path=config.changelog_path,
            entry=entry,
            links=config.entry_links(),
            title_token=config.title_token,
            chunk_size=config.chunk_size,
            dry_run=config.dry_run,
        )
    except ChangelogError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    if result.status is AddEntryStatus.NO_MATCHING_SECTION:
        typer.echo(
            f"Warning: no section of {result.changelog_path} matches category keyword '{result.keyword}' - the entry was not added.",
            err=True,
        )
        raise typer.Exit(1)

    if result.status is AddEntryStatus.DRY_RUN:
        typer.echo(result.content, nl=False)
        return

    typer.echo(f"Added entry to {result.changelog_path}:")
    typer.echo(result.rendered_entry.rstrip())


@typer_app.command(name="inspect")
def inspect_cli(
    ctx: typer.Context,
    changelog_path: Annotated[Path | None, Option(envvar="CHANGELOG_PATH", help="Path to the changelog document.")] = None,
) -> None:
    """Print the heading outline of a changelog and check for the Unpublished section."""
    try:
        config = get_inspect_config(debug=ctx.obj["debug"], changelog_path=changelog_path)
    except RequiredConfigurationElementError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    try:
        content = read_changelog(config.changelog_path)
    except ChangelogError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    inspector = ChangelogInspector(unpublished_heading=config.unpublished_heading)
    for heading in inspector.headings(content):
        typer.echo(f"{'  ' * (heading.level - 1)}{'#' * heading.level} {heading.text}")

    if not inspector.has_unpublished_section(content):
        typer.echo(f"No '{config.unpublished_heading}' section found in {config.changelog_path}", err=True)
        raise typer.Exit(1)

    subsections = inspector.unpublished_subsections(content)
    typer.echo(f"'{config.unpublished_heading}' section found with {len(subsections)} subsection(s)")


@typer_app.command(name="init")
def init_cli(
    ctx: typer.Context,
    changelog_path: Annotated[Path | None, Option(envvar="CHANGELOG_PATH", help="Path of the changelog document to create.")] = None,
    force: Annotated[bool, Option(help="Overwrite an existing changelog.")] = False,
) -> None:
    """Create a new changelog with an empty Unpublished section."""
    try:
        config = get_inspect_config(debug=ctx.obj["debug"], changelog_path=changelog_path)
    except RequiredConfigurationElementError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    try:
        path = create_changelog(
            config.changelog_path,
            model=ChangelogTemplateModel(unpublished_heading=config.unpublished_heading),
            force=force,
        )
    except ChangelogError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    typer.echo(f"Created changelog at {path}")


if __name__ == "__main__":
    typer_app()
