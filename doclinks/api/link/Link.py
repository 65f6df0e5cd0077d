"""Link model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Link:
    """A ``[text](target)`` link bound to the document it was found in."""

    display_text: str
    target: str
    source_document: Path
    line_number: int = 1
    column_number: int = 1
    is_embed: bool = False
