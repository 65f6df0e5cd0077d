"""Link API domain."""

from .BrokenLinkError import BrokenLinkError
from .classify_target import classify_target
from .cmd_check import cmd_check
from .extract_links import extract_links
from .find_documents import find_documents
from .Link import Link
from .LinkCheckReport import LinkCheckReport
from .LinkKind import LinkKind
from .LinkValidator import LinkValidator
from .resolve_target import resolve_target
from .ValidationResult import ValidationResult

__all__ = [
    "BrokenLinkError",
    "Link",
    "LinkCheckReport",
    "LinkKind",
    "LinkValidator",
    "ValidationResult",
    "classify_target",
    "cmd_check",
    "extract_links",
    "find_documents",
    "resolve_target",
]
