"""Extract title, body and lead from Markdown notes with YAML frontmatter.

Usage::

    from notecontent import parse

    content = parse(source)
    content.title, content.body, content.lead
"""

from notecontent.errors import DocumentWalkError, FrontmatterDecodeError, NoteContentError
from notecontent.markdown.parser import Parser, parse
from notecontent.models import Content

__version__ = "0.1.0"

__all__ = [
    "Content",
    "DocumentWalkError",
    "FrontmatterDecodeError",
    "NoteContentError",
    "Parser",
    "parse",
]
