"""Locate and decode the YAML frontmatter block of a note."""

import logging
from dataclasses import dataclass
from typing import Any

import yaml
from frontmatter.default_handlers import YAMLHandler

from notecontent.errors import FrontmatterDecodeError
from notecontent.markdown.delimiters import FRONTMATTER_RE
from notecontent.markdown.document import ParseContext
from notecontent.models import not_empty

logger = logging.getLogger(__name__)

_yaml_handler = YAMLHandler()


@dataclass(frozen=True)
class Frontmatter:
    """Metadata decoded from a frontmatter block.

    ``values`` is ``None`` when the note has no metadata block, in which case
    ``start`` and ``end`` are both 0.
    """

    values: dict[str, Any] | None = None
    start: int = 0
    end: int = 0

    def get_string(self, *keys: str) -> str | None:
        """Return the first string value found for any of *keys*.

        A key holding a non-string value (list, number, mapping) is a miss.
        """
        if self.values is None:
            return None

        for key in keys:
            value = self.values.get(key)
            if isinstance(value, str):
                return not_empty(value)
        return None


def parse_frontmatter(context: ParseContext, source: str) -> Frontmatter:
    """Find the frontmatter block at the start of *source* and decode it.

    *context* must be the one the document tree was parsed with, since the
    parser's metadata extension stores the block text there.

    Raises:
        FrontmatterDecodeError: If the block content is not a valid
            YAML mapping.
    """
    match = FRONTMATTER_RE.match(source)
    if match is None:
        return Frontmatter()

    logger.debug("Frontmatter block at %d-%d", match.start(), match.end())
    return Frontmatter(
        values=decode_metadata(context),
        start=match.start(),
        end=match.end(),
    )


def decode_metadata(context: ParseContext) -> dict[str, Any] | None:
    """Decode the metadata block stored in *context*.

    Returns ``None`` when the parser recorded no block, and an empty dict for
    an empty block. Scalar keys such as ``2024`` are turned into strings.
    """
    text = context.front_matter
    if text is None:
        return None

    try:
        data = _yaml_handler.load(text)
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in frontmatter: %s", e)
        raise FrontmatterDecodeError(f"Invalid YAML in frontmatter: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterDecodeError(
            f"Frontmatter must be a mapping, got {type(data).__name__}"
        )

    if None in data:
        raise FrontmatterDecodeError("Frontmatter has an empty key")

    return {str(key): value for key, value in data.items()}
