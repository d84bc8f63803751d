"""Markdown note parsing: frontmatter, document tree and content extraction."""

from notecontent.markdown.frontmatter import Frontmatter, parse_frontmatter
from notecontent.markdown.parser import Parser, get_parser, parse

__all__ = ["Frontmatter", "Parser", "get_parser", "parse", "parse_frontmatter"]
