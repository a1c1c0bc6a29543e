"""Logging configuration for the catalog browser."""

from __future__ import annotations

import logging
from pathlib import Path

from menudishes.config import DEBUG_LOG_PATH, LOG_LEVEL


def configure_logging(level: str | None = None, log_path: str | Path | None = None) -> None:
    """Send process logs to the debug log file.

    Textual owns the terminal while the app runs, so nothing is written to stderr.
    """
    path = Path(log_path or DEBUG_LOG_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    log_level = logging.getLevelName((level or LOG_LEVEL).upper())
    if not isinstance(log_level, int):
        # Unknown names come back as "Level <name>"; keep the default.
        log_level = logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.FileHandler(path, encoding="utf-8")],
        force=True,
    )

    # The OpenAI client stack is chatty below WARNING.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
