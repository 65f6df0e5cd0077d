"""Link parsers package."""

from pathlib import Path

from ._BaseParser import BaseParser
from ._MarkdownParser import MarkdownParser
from .LinkRef import LinkRef

_PARSERS: dict[str, type[BaseParser]] = {
    "markdown": MarkdownParser,
}

_EXTENSIONS: dict[str, str] = {
    ".md": "markdown",
    ".markdown": "markdown",
}


def get_parser(parser_name: str | None = None, file_path: Path | None = None) -> BaseParser:
    """Get a parser instance by name or file extension.

    Documents with an unknown extension are parsed as markdown, since every
    document the validator enumerates is treated as markdown.
    """
    if parser_name:
        parser_cls = _PARSERS.get(parser_name)
        if not parser_cls:
            raise ValueError(f"Unknown parser: {parser_name}")
        return parser_cls()

    name = "markdown"
    if file_path is not None:
        name = _EXTENSIONS.get(file_path.suffix.lower(), "markdown")
    return _PARSERS[name]()


__all__ = ["BaseParser", "LinkRef", "MarkdownParser", "get_parser"]
