"""ValidationResult model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path

from .BrokenLinkError import BrokenLinkError
from .LinkKind import LinkKind


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one link.

    ``resolved_path`` is only set for internal links.
    """

    target: str
    source_document: Path
    is_valid: bool
    kind: LinkKind
    resolved_path: Path | None = None
    line_number: int = 1

    def raise_for_status(self) -> None:
        """Raise BrokenLinkError if the link is not valid."""
        if not self.is_valid:
            raise BrokenLinkError(self)
