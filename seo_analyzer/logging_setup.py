"""Logging for the analyzer service: console plus a per-run log file."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

LOG_DIR = Path(os.getenv("APP_LOG_DIR", "logs"))
LOG_FILENAME = os.getenv("APP_LOG_FILENAME", "seo-analyzer.log")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# Outbound fetch libraries log every connection at DEBUG/INFO.
CHATTY_LIBRARIES = ("urllib3", "charset_normalizer")


def _normalise_level(level: Optional[str | int]) -> int:
    """Map ``LOG_LEVEL`` style values to a logging level, defaulting to INFO."""

    if isinstance(level, int):
        return level
    text = (level or "").strip().upper()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text) if text else None
    return resolved if isinstance(resolved, int) else logging.INFO


def _handlers(log_path: Path) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    # mode="w": every process run gets an empty file.
    run_file = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    for handler in (console, run_file):
        handler.setFormatter(formatter)
    return [console, run_file]


def configure_logging(level: Optional[str | int] = None, log_dir: Optional[Path] = None) -> Path:
    """Route all service logging to stderr and ``<log_dir>/<LOG_FILENAME>``.

    Any handlers installed earlier on the root logger are closed and
    replaced, so calling this twice does not duplicate output. Returns the
    log file path.
    """

    root_level = _normalise_level(level)
    directory = log_dir or LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)
    log_path = directory / LOG_FILENAME

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    for handler in _handlers(log_path):
        root.addHandler(handler)
    root.setLevel(root_level)

    library_level = root_level if root_level <= logging.DEBUG else logging.WARNING
    for name in CHATTY_LIBRARIES:
        logging.getLogger(name).setLevel(library_level)

    logging.getLogger(__name__).info("Writing service logs to %s", log_path)
    return log_path
