"""Internal target resolution (UNO: single function)."""

import os
from pathlib import Path


def resolve_target(
    target: str,
    source_document: Path,
    docs_root: Path,
    index_file: str = "index.md",
    default_suffix: str = ".md",
) -> Path:
    """Map an internal link target to the file the site generator serves for it.

    Absolute targets (``/guide``) are relative to ``docs_root``, everything else
    to the directory of ``source_document``. Extensionless results get
    ``index_file`` appended when the target ends with "/", else ``default_suffix``.

    The trailing "/" is read from the raw target because normalisation drops it.
    """
    if target.startswith("/"):
        base = Path(docs_root)
        relative = target[1:]
    else:
        base = Path(source_document).parent
        relative = target

    joined = os.path.normpath(os.path.join(base, relative))
    if not os.path.splitext(joined)[1]:
        if target.endswith("/"):
            joined = os.path.join(joined, index_file)
        else:
            joined += default_suffix
    return Path(joined)
