"""Link validator for a documentation tree."""

from pathlib import Path

from ...utils.logger import get_logger
from ..config.LinkCheckConfig import LinkCheckConfig
from .BrokenLinkError import BrokenLinkError
from .classify_target import classify_target
from .extract_links import extract_links
from .find_documents import find_documents
from .Link import Link
from .LinkCheckReport import LinkCheckReport
from .LinkKind import LinkKind
from .resolve_target import resolve_target
from .ValidationResult import ValidationResult

logger = get_logger("link.validator")


class LinkValidator:
    """Validates the markdown links of every document under ``docs_root``."""

    def __init__(self, docs_root: Path, config: LinkCheckConfig | None = None):
        """Initialize validator.

        Args:
            docs_root: Documentation root; absolute targets ("/x") resolve against it
            config: Check configuration, defaults when omitted
        """
        self.docs_root = Path(docs_root)
        self.config = config or LinkCheckConfig()

    def find_documents(self) -> list[Path]:
        """Enumerate documents. Raises OSError when the root is missing or unreadable."""
        return find_documents(self.docs_root, self.config.extensions, self.config.exclude_dirs)

    def extract(self, document: Path) -> list[Link]:
        """Read a document and extract its links. Raises OSError when unreadable."""
        text = document.read_text(encoding="utf-8", errors="replace")
        return extract_links(document, text)

    def validate(self, link: Link) -> ValidationResult:
        """Classify a link and, for internal targets, check the resolved file exists."""
        kind = classify_target(link.target, self.config.external_prefixes, self.config.anchor_prefix)
        if kind is not LinkKind.INTERNAL:
            return ValidationResult(
                target=link.target,
                source_document=link.source_document,
                is_valid=True,
                kind=kind,
                line_number=link.line_number,
            )

        target = link.target
        if self.config.strip_fragments:
            target = target.split("#", 1)[0] or target

        resolved = resolve_target(
            target,
            link.source_document,
            self.docs_root,
            index_file=self.config.index_file,
            default_suffix=self.config.default_suffix,
        )
        try:
            exists = resolved.exists()
        except OSError as exc:
            # e.g. ENAMETOOLONG or EACCES on a parent directory: the target is unreachable
            logger.debug("Cannot stat %s: %s", resolved, exc)
            exists = False
        return ValidationResult(
            target=link.target,
            source_document=link.source_document,
            is_valid=exists,
            kind=kind,
            resolved_path=resolved,
            line_number=link.line_number,
        )

    def record(self, report: LinkCheckReport, link: Link) -> ValidationResult:
        """Validate ``link`` and add the result (and any broken link) to ``report``."""
        result = self.validate(link)
        report.results.append(result)
        try:
            result.raise_for_status()
        except BrokenLinkError as exc:
            logger.info("Broken link %s (resolved to %s)", exc, result.resolved_path)
            report.broken.append(exc)
        return result

    def run(self) -> LinkCheckReport:
        """Check every link of every document.

        Raises:
            OSError: If the documentation root or a document cannot be read
        """
        report = LinkCheckReport(docs_root=self.docs_root)
        report.documents = self.find_documents()
        logger.debug("Found %d documents under %s", len(report.documents), self.docs_root)
        for document in report.documents:
            for link in self.extract(document):
                self.record(report, link)
        return report
