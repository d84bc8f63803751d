"""Markdown parser for note content: title, body and lead."""

import logging
from collections.abc import Sequence
from functools import lru_cache

from notecontent.config import get_settings
from notecontent.markdown.document import (
    DocumentParser,
    Node,
    ParseContext,
    WalkStatus,
    walk,
)
from notecontent.markdown.frontmatter import Frontmatter, parse_frontmatter
from notecontent.models import Content, not_empty

logger = logging.getLogger(__name__)

DEFAULT_TITLE_KEYS = ("title", "Title")


class Parser:
    """Parses the content of Markdown notes.

    The document parser is built once and shared by every ``parse`` call;
    each call uses a fresh ``ParseContext``, so concurrent calls are safe.
    """

    def __init__(
        self,
        title_keys: Sequence[str] | None = None,
        preset: str | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            title_keys: Frontmatter keys checked for the title, in priority
                order. Defaults to the ``title_keys`` setting.
            preset: markdown-it preset name. Defaults to the
                ``markdown_preset`` setting.
        """
        settings = get_settings()
        self.title_keys = tuple(title_keys if title_keys is not None else settings.title_keys)
        self._document_parser = DocumentParser(preset or settings.markdown_preset)

    def parse(self, source: str) -> Content:
        """Extract title, body and lead from a note.

        Raises:
            FrontmatterDecodeError: If the frontmatter block is malformed.
            DocumentWalkError: If the document tree cannot be traversed.
        """
        context = ParseContext()
        root = self._document_parser.parse(source, context)

        frontmatter = parse_frontmatter(context, source)
        title, body_start = parse_title(frontmatter, root, self.title_keys)

        # The body never includes the metadata block
        if frontmatter.values is not None:
            body_start = max(body_start, frontmatter.end)

        body = parse_body(body_start, source)
        return Content(title=title, body=body, lead=parse_lead(body))


def parse_title(
    frontmatter: Frontmatter,
    root: Node,
    title_keys: Sequence[str] = DEFAULT_TITLE_KEYS,
) -> tuple[str | None, int]:
    """Resolve the note title and the offset where the body starts.

    Priority:
    1. Frontmatter title; the body starts after the frontmatter block and
       keeps any heading that follows it.
    2. The most significant heading, the first one winning among equals;
       the body starts after the heading's last line.
    3. No title; the body starts at 0.
    """
    title = frontmatter.get_string(*title_keys)
    if title is not None:
        logger.debug("Title from frontmatter: %r", title)
        return title, frontmatter.end

    best: Node | None = None

    def visit(node: Node) -> WalkStatus:
        nonlocal best
        if not node.is_heading:
            return WalkStatus.CONTINUE

        if best is None or node.level < best.level:
            best = node
            if node.level == 1:
                return WalkStatus.STOP
        return WalkStatus.SKIP_CHILDREN

    walk(root, visit)

    if best is None:
        return None, 0

    body_start = 0
    lines = best.source_lines()
    if lines:
        body_start = lines[-1].stop

    title = not_empty(best.text())
    logger.debug("Title from h%d heading: %r", best.level, title)
    return title, body_start


def parse_body(start: int, source: str) -> str | None:
    """Extract the whole content after *start*, trimmed."""
    return not_empty(source[start:].strip())


def parse_lead(body: str | None) -> str | None:
    """Extract the body content until the first blank line.

    Lines are rejoined with ``"\\n"``, so a CRLF body gives an LF lead.
    """
    if body is None:
        return None

    lead = ""
    for line in body.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip():
            break
        lead += line + "\n"

    return not_empty(lead.strip())


@lru_cache
def get_parser() -> Parser:
    """Get the shared parser instance."""
    return Parser()


def parse(source: str) -> Content:
    """Parse *source* with the shared parser."""
    return get_parser().parse(source)
