"""Markdown document tree built on markdown-it-py.

The tree is exposed through a small ``Node`` adapter so the title logic only
depends on heading capabilities (level, text, source lines) and a pre-order
``walk`` with early stop.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock
from markdown_it.rules_core import StateCore
from markdown_it.tree import SyntaxTreeNode

from notecontent.errors import DocumentWalkError
from notecontent.markdown.delimiters import FRONTMATTER_RE

FRONT_MATTER_ENV_KEY = "front_matter"

# markdown-it normalizes these to "\n" before splitting into lines
_NEWLINE_RE = re.compile(r"\r\n?|\n")


class WalkStatus(StrEnum):
    """What ``walk`` should do after visiting a node."""

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


@dataclass(frozen=True)
class LineSpan:
    """Offsets of one source line, ``stop`` excluding the line terminator."""

    start: int
    stop: int


@dataclass
class ParseContext:
    """Per-call parsing state, handed to markdown-it as its ``env``."""

    env: dict[str, Any] = field(default_factory=dict)

    @property
    def front_matter(self) -> str | None:
        """Raw text of the leading metadata block, if the parser saw one."""
        return self.env.get(FRONT_MATTER_ENV_KEY)


def metadata_plugin(md: MarkdownIt) -> None:
    """Recognize a leading ``---`` block and keep its raw text in ``env``.

    The block is matched with ``FRONTMATTER_RE``, the same pattern the
    frontmatter locator uses, so both agree on where the metadata is.
    """
    md.block.ruler.before("table", "front_matter", _front_matter_rule)
    md.core.ruler.push("front_matter_env", _store_front_matter)


def _front_matter_rule(state: StateBlock, start_line: int, end_line: int, silent: bool) -> bool:
    # only the first block of the document can open a metadata block
    if state.level != 0 or state.tokens:
        return False

    match = FRONTMATTER_RE.match(state.src)
    if match is None:
        return False

    # the opening delimiter must be this line, not one skipped as a reference
    if state.src.count("\n", 0, match.start(1)) != start_line + 1:
        return False
    if silent:
        return True

    closing_line = state.src.count("\n", 0, match.end())

    token = state.push("front_matter", "", 0)
    token.hidden = True
    token.block = True
    token.markup = "---"
    token.content = match.group(1)
    token.map = [start_line, closing_line + 1]

    state.line = closing_line + 1
    return True


def _store_front_matter(state: StateCore) -> None:
    for token in state.tokens:
        if token.type == "front_matter":
            state.env[FRONT_MATTER_ENV_KEY] = token.content
            return


class Node:
    """A document node seen through the capabilities the title logic needs."""

    def __init__(self, syntax_node: SyntaxTreeNode, lines: Sequence[LineSpan]) -> None:
        self._node = syntax_node
        self._lines = lines

    def __repr__(self) -> str:
        return f"Node(type={self.type!r}, map={self._map!r})"

    @property
    def _map(self) -> tuple[int, int] | None:
        # the root node has no token, so no line map
        if self._node.is_root:
            return None
        return self._node.map

    @property
    def type(self) -> str:
        return self._node.type

    @property
    def children(self) -> list["Node"]:
        return [Node(child, self._lines) for child in self._node.children]

    @property
    def is_heading(self) -> bool:
        return self._node.type == "heading"

    @property
    def level(self) -> int:
        """Heading level (1-6), or 0 for anything that is not a heading."""
        if not self.is_heading:
            return 0
        return int(self._node.tag[1:])

    def text(self) -> str:
        """Plain text of the node's inline content."""
        return _plain_text(self._node)

    def source_lines(self) -> list[LineSpan]:
        """Source lines spanned by this node, empty when unknown."""
        if self._map is None:
            return []
        start, end = self._map
        return list(self._lines[start:end])


def _plain_text(node: SyntaxTreeNode) -> str:
    if node.type in ("text", "code_inline"):
        return node.content
    if node.type in ("softbreak", "hardbreak"):
        return " "
    return "".join(_plain_text(child) for child in node.children)


def _line_spans(source: str) -> list[LineSpan]:
    spans: list[LineSpan] = []
    start = 0
    for match in _NEWLINE_RE.finditer(source):
        spans.append(LineSpan(start, match.start()))
        start = match.end()
    spans.append(LineSpan(start, len(source)))
    return spans


class DocumentParser:
    """Markdown parser with the metadata extension enabled.

    Build one instance and share it. Each ``parse`` call gets its own
    markdown-it state; the only per-call mutable data is ``context.env``.
    """

    def __init__(self, preset: str = "commonmark") -> None:
        self._md = MarkdownIt(preset).use(metadata_plugin)

    def parse(self, source: str, context: ParseContext) -> Node:
        """Parse *source* into a tree, storing extension data in *context*."""
        tokens = self._md.parse(source, context.env)
        return Node(SyntaxTreeNode(tokens), _line_spans(source))


def walk(node: Node, visitor: Callable[[Node], WalkStatus]) -> WalkStatus:
    """Visit *node* and its descendants depth-first, in document order.

    Returns ``WalkStatus.STOP`` if the visitor stopped the walk early,
    ``WalkStatus.CONTINUE`` otherwise.

    Raises:
        DocumentWalkError: If the visitor raises or returns something other
            than a ``WalkStatus``.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        try:
            status = visitor(current)
        except DocumentWalkError:
            raise
        except Exception as e:
            raise DocumentWalkError(f"Visitor failed on {current!r}: {e}") from e

        if not isinstance(status, WalkStatus):
            raise DocumentWalkError(f"Visitor returned {status!r} for {current!r}")
        if status is WalkStatus.STOP:
            return WalkStatus.STOP
        if status is WalkStatus.CONTINUE:
            stack.extend(reversed(current.children))

    return WalkStatus.CONTINUE
