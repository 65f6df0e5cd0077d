"""Link check report model."""

from dataclasses import dataclass, field
from pathlib import Path

from .BrokenLinkError import BrokenLinkError
from .ValidationResult import ValidationResult


@dataclass
class LinkCheckReport:
    docs_root: Path
    documents: list[Path] = field(default_factory=list)
    results: list[ValidationResult] = field(default_factory=list)
    broken: list[BrokenLinkError] = field(default_factory=list)

    @property
    def links_checked(self) -> int:
        return len(self.results)

    @property
    def is_valid(self) -> bool:
        return not self.broken
