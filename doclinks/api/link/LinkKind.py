"""LinkKind enum for target classification."""

from enum import Enum


class LinkKind(str, Enum):
    EXTERNAL = "external"
    ANCHOR = "anchor"
    INTERNAL = "internal"
