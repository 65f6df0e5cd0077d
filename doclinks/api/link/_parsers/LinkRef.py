"""Link reference dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRef:
    """A link found by a parser, not yet bound to a document."""

    line_number: int
    column_number: int
    raw_target: str
    alias: str = ""
    is_embed: bool = False
