"""Link check API command.

CLI: doclinks [--root PATH] [--docs-dir NAME] [--config PATH]
"""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from .._output_schemas.link import BrokenLinkEntry, LinkCheckOutput
from ..config.LinkCheckConfig import LinkCheckConfig
from ..StageResult import StageResult
from .LinkCheckReport import LinkCheckReport
from .LinkValidator import LinkValidator

logger = get_logger("link.cmd_check")


def _display_path(path: Path | None, root: Path) -> str:
    if path is None:
        return ""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def _failure_output(docs_root: Path | str, error: str) -> dict:
    return LinkCheckOutput(
        errors=[error],
        warnings=[],
        docs_root=str(docs_root),
        documents_checked=0,
        links_checked=0,
        broken_count=0,
        broken_links=[],
        is_valid=False,
    ).model_dump(mode="python")


def cmd_check(
    root: str | Path | None = None,
    docs_dir: str | None = None,
    config_path: str | Path | None = None,
    config: LinkCheckConfig | None = None,
) -> StageResult:
    """Check every internal markdown link under the documentation root.

    Args:
        root: Project root; defaults to the current working directory
        docs_dir: Overrides ``config.docs_dir``
        config_path: Explicit config file; otherwise DOCLINKS_CONFIG or <root>/.doclinks.json
        config: Pre-loaded configuration, skips loading from disk
    """
    project_root = Path(root) if root is not None else Path.cwd()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            cfg = config
            if cfg is None:
                cfg = LinkCheckConfig.load(project_root, Path(config_path) if config_path else None)
        except ValueError as e:
            logger.error("Invalid configuration: %s", e)
            result_obj.output = _failure_output(project_root / (docs_dir or "docs"), str(e))
            result_obj.result = f"Link check failed: {e}"
            result_obj.success = False
            return
        if docs_dir:
            cfg = cfg.model_copy(update={"docs_dir": docs_dir})

        docs_root = cfg.docs_root(project_root)
        validator = LinkValidator(docs_root, cfg)
        report = LinkCheckReport(docs_root=docs_root)

        yield (0.2, "Finding markdown files...")
        try:
            report.documents = validator.find_documents()
            yield (0.3, f"Found {len(report.documents)} markdown files")

            links = []
            for i, document in enumerate(report.documents):
                links.extend(validator.extract(document))
                if (i + 1) % 50 == 0:
                    yield (0.3 + 0.3 * ((i + 1) / len(report.documents)), f"Read {i + 1} files...")
        except OSError as e:
            logger.error("Cannot read documentation tree %s: %s", docs_root, e)
            result_obj.output = _failure_output(docs_root, f"Cannot read documentation tree: {e}")
            result_obj.result = f"Link check failed: {e}"
            result_obj.success = False
            return
        yield (0.6, f"Found {len(links)} links")

        for link in links:
            validator.record(report, link)
        yield (1.0, "Complete")

        broken_links = [
            BrokenLinkEntry(
                source_document=_display_path(error.result.source_document, project_root),
                target=error.result.target,
                resolved_path=_display_path(error.result.resolved_path, project_root),
                line_number=error.result.line_number,
            )
            for error in report.broken
        ]
        result_obj.output = LinkCheckOutput(
            errors=[],
            warnings=[],
            docs_root=_display_path(docs_root, project_root),
            documents_checked=len(report.documents),
            links_checked=report.links_checked,
            broken_count=len(broken_links),
            broken_links=broken_links,
            is_valid=report.is_valid,
        ).model_dump(mode="python")

        if report.is_valid:
            result_obj.result = f"All links valid ({report.links_checked} links in {len(report.documents)} files)"
            result_obj.success = True
        else:
            link_word = "link" if len(broken_links) == 1 else "links"
            result_obj.result = f"Found {len(broken_links)} broken {link_word}"
            result_obj.success = False

    return StageResult(announce="Checking documentation links...", progress_callback=do_work)
