"""Rendering of changelog entries as markdown list items."""

from ..utils.constants import ENTRY_TERMINATOR
from .models import ChangelogEntry, EntryLinks


def format_entry(entry: ChangelogEntry, links: EntryLinks | None = None) -> str:
    """Render an entry as a single markdown bullet followed by a blank line.

    The message length is validated when the entry is collected and is not
    checked again here.

    Args:
        entry: The collected changelog entry.
        links: Link targets and author. Defaults to EntryLinks().

    Returns:
        The rendered list item, e.g. ``- Fix crash ([ABC-1](...), [#9](...) by [@me](...)).``
    """
    if links is None:
        links = EntryLinks()
    issue_tracker_url = links.issue_tracker_url.rstrip("/")
    repository_url = links.repository_url.rstrip("/")
    profile_url = links.profile_url.rstrip("/")

    ticket = f"[{entry.ticket_id}]({issue_tracker_url}/{entry.ticket_id})"
    pull_request = f"[#{entry.pull_request_id}]({repository_url}/pull/{entry.pull_request_id})"
    author = f"[@{links.author}]({profile_url}/{links.author})"
    return f"- {entry.message} ({ticket}, {pull_request} by {author}).{ENTRY_TERMINATOR}"
