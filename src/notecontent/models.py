"""Pydantic models for parsed note content."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def not_empty(value: str | None) -> str | None:
    """Collapse an empty string to ``None``.

    This is the only way an optional string is built in this package, so
    ``""`` and "absent" never coexist as two different values.
    """
    if not value:
        return None
    return value


OptionalStr = Annotated[str | None, AfterValidator(not_empty)]


class Content(BaseModel):
    """Metadata extracted from a note.

    Fields:
        title: From the frontmatter ``title`` key, else the best heading.
        body: Everything after the title (or frontmatter), trimmed.
        lead: The first paragraph of the body.
    """

    model_config = ConfigDict(frozen=True)

    title: OptionalStr = None
    body: OptionalStr = None
    lead: OptionalStr = None
