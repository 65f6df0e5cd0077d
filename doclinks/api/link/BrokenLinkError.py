"""Per-link validation error."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ValidationResult import ValidationResult


class BrokenLinkError(Exception):
    """Raised for a link whose internal target does not exist.

    Recoverable: the validator collects these into the report and keeps going.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(f"{result.source_document} → {result.target}")
