"""Top-level doclinks configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .LogConfig import LogConfig

CONFIG_ENV_VAR = "DOCLINKS_CONFIG"
DEFAULT_CONFIG_NAME = ".doclinks.json"


class LinkCheckConfig(BaseModel):
    """Configuration for a link check run.

    Defaults reproduce the site generator's routing convention, so a project
    without a config file needs nothing but a ``docs`` directory.
    """

    model_config = ConfigDict(extra="forbid")

    docs_dir: str = Field("docs", min_length=1, description="Documentation root relative to the project root")
    extensions: list[str] = Field(default_factory=lambda: [".md"], min_length=1, description="Document extensions")
    exclude_dirs: list[str] = Field(default_factory=list, description="Directory names skipped while walking")
    index_file: str = Field("index.md", min_length=1, description="File appended to directory-style targets")
    default_suffix: str = Field(".md", min_length=1, description="Suffix appended to extensionless targets")
    external_prefixes: list[str] = Field(
        default_factory=lambda: ["http://", "https://"],
        description="Target prefixes treated as external and never resolved",
    )
    anchor_prefix: str = Field("#", min_length=1, description="Prefix of in-page anchor targets")
    strip_fragments: bool = Field(False, description="Drop '#fragment' from internal targets before resolving")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("extensions must not contain empty strings")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    def docs_root(self, root: Path) -> Path:
        """Documentation root for a project rooted at ``root``."""
        return Path(root) / self.docs_dir

    @classmethod
    def get_config_path(cls, root: Path) -> Path:
        """Get path to config file based on DOCLINKS_CONFIG or default to <root>/.doclinks.json."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        return Path(root) / DEFAULT_CONFIG_NAME

    @classmethod
    def load(cls, root: Path, path: Path | None = None) -> "LinkCheckConfig":
        """Load and validate config.

        An explicit ``path`` (or DOCLINKS_CONFIG) must exist. The default
        ``<root>/.doclinks.json`` is optional; without it defaults apply.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
        config_path = Path(path).expanduser() if path is not None else cls.get_config_path(root)

        if not config_path.exists():
            if explicit:
                raise ValueError(f"Configuration file not found at {config_path}")
            return cls()

        try:
            with config_path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {config_path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
