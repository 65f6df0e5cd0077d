"""Create the main Typer CLI app."""

from pathlib import Path

import typer

from doclinks.api._output_schemas.link import LinkCheckOutput
from doclinks.api.config.LinkCheckConfig import LinkCheckConfig
from doclinks.api.config.LogConfig import LogConfig
from doclinks.api.link.cmd_check import cmd_check
from doclinks.cli._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from doclinks.utils.get_package_version import get_package_version
from doclinks.utils.logger import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"doclinks {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="doclinks",
        help="Check internal markdown links of a documentation tree",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def check(
        root: Path = typer.Option(Path("."), "--root", help="Project root containing the docs directory"),
        docs_dir: str | None = typer.Option(None, "--docs-dir", help="Documentation directory relative to root"),
        config_path: Path | None = typer.Option(None, "--config", help="Path to a JSON config file"),
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", "-v", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ) -> None:
        """Validate every internal markdown link under the documentation root."""
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(2)

        # A broken config file is reported by the command itself
        try:
            cfg: LinkCheckConfig | None = LinkCheckConfig.load(root, config_path)
        except ValueError:
            cfg = None
        log_cfg = cfg.log if cfg is not None else LogConfig()
        configure_logging(log_cfg.level, log_cfg.file, force=True)

        _handle_stage_result(cmd_check, LinkCheckOutput, display)(
            root=root,
            docs_dir=docs_dir,
            config_path=config_path,
            config=cfg,
        )

    return app
