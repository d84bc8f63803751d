"""Exceptions raised while parsing note content."""


class NoteContentError(Exception):
    """Base class for note parsing failures."""


class FrontmatterDecodeError(NoteContentError, ValueError):
    """The frontmatter block was found but its content is not valid metadata."""


class DocumentWalkError(NoteContentError, RuntimeError):
    """Traversal of the parsed document tree failed."""
