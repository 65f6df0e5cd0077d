"""Link extraction (UNO: single function)."""

from pathlib import Path

from ._parsers import get_parser
from .Link import Link


def extract_links(document: Path, text: str) -> list[Link]:
    """Extract every markdown link from a document's content, in document order."""
    parser = get_parser(file_path=document)
    return [
        Link(
            display_text=ref.alias,
            target=ref.raw_target,
            source_document=document,
            line_number=ref.line_number,
            column_number=ref.column_number,
            is_embed=ref.is_embed,
        )
        for ref in parser.parse(text)
    ]
