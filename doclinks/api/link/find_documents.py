"""Documents enumeration (UNO: single function)."""

from collections.abc import Iterable
from pathlib import Path


def find_documents(
    root: Path,
    extensions: Iterable[str] = (".md",),
    exclude_dirs: Iterable[str] = (),
) -> list[Path]:
    """Recursively list documents under ``root``.

    Args:
        root: Documentation root directory
        extensions: File extensions to include (compared case-insensitively)
        exclude_dirs: Directory names that are not descended into

    Returns:
        Sorted list of document paths

    Raises:
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
        PermissionError: If a directory cannot be read
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Documentation root does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Documentation root is not a directory: {root}")

    wanted = {ext.lower() for ext in extensions}
    excluded = set(exclude_dirs)
    documents: list[Path] = []
    pending = [root]
    while pending:
        directory = pending.pop()
        # iterdir() raises PermissionError for unreadable directories
        for child in directory.iterdir():
            if child.is_dir():
                if child.name not in excluded:
                    pending.append(child)
            elif child.is_file() and child.suffix.lower() in wanted:
                documents.append(child)
    return sorted(documents)
