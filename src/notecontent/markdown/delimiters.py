"""Delimiter pattern shared by the frontmatter locator and the markdown extension."""

import re

# Optional blank lines, then a block opened and closed by lines made only of
# 3+ dashes. Group 1 is the enclosed text. Padding is horizontal whitespace
# only, so the scan stays linear in the size of the note.
FRONTMATTER_RE = re.compile(
    r"\A(?:[ \t]*(?:\r\n?|\n))*"
    r"[ \t]*-{3,}[ \t]*(?:\r\n?|\n)"
    r"((?:[^\r\n]*(?:\r\n?|\n))*?)"
    r"[ \t]*-{3,}[ \t]*(?=\r|\n|\Z)"
)
