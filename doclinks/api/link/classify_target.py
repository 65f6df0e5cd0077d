"""Target classification (UNO: single function)."""

from collections.abc import Sequence

from .LinkKind import LinkKind

DEFAULT_EXTERNAL_PREFIXES = ("http://", "https://")
DEFAULT_ANCHOR_PREFIX = "#"


def classify_target(
    target: str,
    external_prefixes: Sequence[str] = DEFAULT_EXTERNAL_PREFIXES,
    anchor_prefix: str = DEFAULT_ANCHOR_PREFIX,
) -> LinkKind:
    """Classify a link target as external, anchor or internal.

    External and anchor targets are never checked; only internal targets are
    resolved against the filesystem.
    """
    if target.startswith(tuple(external_prefixes)):
        return LinkKind.EXTERNAL
    if target.startswith(anchor_prefix):
        return LinkKind.ANCHOR
    return LinkKind.INTERNAL
