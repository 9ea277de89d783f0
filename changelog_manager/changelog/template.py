"""Creation of new changelog documents from a template."""

from pathlib import Path

import jinja2
import structlog
from pydantic import BaseModel

from ..utils.constants import DEFAULT_CHANGELOG_ENCODING, DEFAULT_TITLE_TOKEN, UNPUBLISHED_HEADING
from .exceptions import ChangelogTemplateError, ChangelogWriteError
from .models import IssueCategory

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

TEMPLATES_DIRECTORY = Path(__file__).parent.parent / "templates"
CHANGELOG_TEMPLATE_NAME = "changelog.md.j2"

SECTION_ORDER = [
    IssueCategory.LIBRARY_UPDATE,
    IssueCategory.BREAKING_CHANGE,
    IssueCategory.NEW_FEATURE,
    IssueCategory.BUG_FIX,
    IssueCategory.OTHER,
]
"""Order of category sections under the unpublished heading."""


class ChangelogTemplateModel(BaseModel):
    """Values rendered into a new changelog."""

    title: str = DEFAULT_TITLE_TOKEN
    unpublished_heading: str = UNPUBLISHED_HEADING
    sections: list[str] = [category.section_title for category in SECTION_ORDER]


def construct_jinja2_environment() -> jinja2.Environment:
    """Construct a Jinja2 environment loading templates shipped with the package."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(TEMPLATES_DIRECTORY),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )


def render_changelog(model: ChangelogTemplateModel | None = None) -> str:
    """Render a new changelog document with an empty unpublished section."""
    if model is None:
        model = ChangelogTemplateModel()
    try:
        template = construct_jinja2_environment().get_template(CHANGELOG_TEMPLATE_NAME)
        return template.render(model.model_dump())
    except (OSError, jinja2.TemplateError) as exc:
        logger.error("Failed to render changelog template", template=CHANGELOG_TEMPLATE_NAME, error=str(exc))
        raise ChangelogTemplateError(f"Unable to render changelog template: {exc}") from exc


def create_changelog(path: Path, model: ChangelogTemplateModel | None = None, force: bool = False) -> Path:
    """Write a new changelog document to a path.

    Raises:
        ChangelogTemplateError: If the path exists and force is not set, or the template fails to render.
        ChangelogWriteError: If the file cannot be written.
    """
    if path.exists() and not force:
        raise ChangelogTemplateError(f"Changelog already exists: {path.absolute()}")
    if model is None:
        model = ChangelogTemplateModel()
    content = render_changelog(model)
    try:
        path.write_text(content, encoding=DEFAULT_CHANGELOG_ENCODING)
    except OSError as exc:
        raise ChangelogWriteError(path, str(exc)) from exc
    logger.info("Created changelog", path=str(path), sections=len(model.sections))
    return path
