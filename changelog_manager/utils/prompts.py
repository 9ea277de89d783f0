"""Interactive collection of changelog entries from the operator."""

import click
import typer

from changelog_manager.changelog.models import ChangelogEntry, IssueCategory
from changelog_manager.utils.constants import (
    DEFAULT_PULL_REQUEST_PLACEHOLDER,
    DEFAULT_TICKET_PLACEHOLDER,
    MAX_MESSAGE_LENGTH,
    MESSAGE_TOO_LONG_ERROR,
)


def validate_message(value: str) -> str:
    """Reject changelog messages longer than the maximum length."""
    if len(value) > MAX_MESSAGE_LENGTH:
        raise click.BadParameter(MESSAGE_TOO_LONG_ERROR)
    return value


def category_choices() -> list[str]:
    """Values offered when prompting for a category."""
    return [category.value for category in IssueCategory]


def collect_entry(
    ticket_id: str | None = None,
    pull_request_id: str | None = None,
    message: str | None = None,
    category: IssueCategory | None = None,
) -> ChangelogEntry:
    """Prompt for every entry field that was not supplied and build the entry.

    An overlong message is reported and prompted for again.
    """
    if ticket_id is None:
        ticket_id = typer.prompt("What is the issue ticket?", default=DEFAULT_TICKET_PLACEHOLDER)
    if pull_request_id is None:
        pull_request_id = typer.prompt("What is the pull request?", default=DEFAULT_PULL_REQUEST_PLACEHOLDER)
    if message is None:
        message = typer.prompt(
            f"What is the changelog message? (max {MAX_MESSAGE_LENGTH} characters)",
            value_proc=validate_message,
        )
    if category is None:
        for issue_category in IssueCategory:
            typer.echo(f"  {issue_category.value}: {issue_category.label}")
        category_value = typer.prompt(
            "What is the type?",
            default=IssueCategory.BUG_FIX.value,
            type=click.Choice(category_choices()),
        )
        category = IssueCategory(category_value)
    return ChangelogEntry(
        message=message,
        ticket_id=ticket_id,
        pull_request_id=pull_request_id,
        category=category,
    )
