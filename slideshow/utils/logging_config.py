"""Logging setup for the slideshow server."""

from __future__ import annotations

import json
import logging
import sys
import time
from typing import Optional

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """
    Minimal JSON log formatter:
      {"t": 1700000000000, "lvl": "INFO", "name": "mod", "msg": "text"}
    """

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload = {
            "t": int(time.time() * 1000),
            "lvl": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(
    level: Optional[str] = None, fmt: str = "text", force: bool = False
) -> None:
    """
    Configure the root logger with a stdout handler.

    Calling this more than once is a no-op unless ``force`` is set, so modules
    can call it defensively without stacking handlers.

    Args:
        level: Log level name (defaults to INFO)
        fmt: "text" or "json"
        force: Reconfigure even if logging was already set up
    """
    root = logging.getLogger()
    if getattr(root, "_slideshow_configured", False) and not force:
        return

    lvl = getattr(logging, (level or "INFO").upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(lvl)
    root._slideshow_configured = True  # type: ignore[attr-defined]

