"""Pydantic output schemas for API commands."""

from ._base import BaseOutputSchema
from .link import BrokenLinkEntry, LinkCheckOutput

__all__ = ["BaseOutputSchema", "BrokenLinkEntry", "LinkCheckOutput"]
