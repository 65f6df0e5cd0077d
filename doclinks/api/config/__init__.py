"""Config API module."""

from .LinkCheckConfig import LinkCheckConfig
from .LogConfig import LogConfig

__all__ = ["LinkCheckConfig", "LogConfig"]
