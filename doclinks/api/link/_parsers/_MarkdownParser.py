"""Markdown link parser.

Grammar of a recognised link::

    link   := ["!"] "[" text "]" "(" target ")"
    text   := one or more characters other than "]"
    target := one or more characters other than ")"

The whole document is scanned at once, so a link may span lines. Matches
never overlap and are reported left to right.

Not handled: escaped brackets, nested brackets in the text, parentheses
inside the target (the target ends at the first ")"), link titles, reference
style links and empty link texts.
"""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

MARKDOWN_URL_PATTERN = re.compile(r"(!)?\[([^\]]+)\]\(([^)]+)\)")


class MarkdownParser(BaseParser):
    """Parser for inline markdown links and images."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        line_number = 1
        line_start = 0
        scanned = 0
        for match in MARKDOWN_URL_PATTERN.finditer(text):
            start = match.start()
            # Count newlines since the previous match
            newlines = text.count("\n", scanned, start)
            if newlines:
                line_number += newlines
                line_start = text.rfind("\n", scanned, start) + 1
            scanned = start

            yield LinkRef(
                line_number=line_number,
                column_number=start - line_start + 1,
                raw_target=match.group(3).strip(),
                alias=match.group(2).strip(),
                is_embed=bool(match.group(1)),
            )
