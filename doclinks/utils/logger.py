import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(level: str = "WARN", log_file: Path | None = None, force: bool = False) -> None:
    """Configure the ``doclinks`` logger tree.

    Args:
        level: One of DEBUG, INFO, WARN, ERROR.
        log_file: Optional path for a rotating log file in addition to stderr.
        force: Drop previously installed handlers and configure again.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")

    root_logger = logging.getLogger("doclinks")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(_LEVELS[level])
    root_logger.propagate = False

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"doclinks.{name}")
