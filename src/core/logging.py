from __future__ import annotations

import logging
import sys

FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    # stderr only: stdout is reserved for the MCP stdio transport
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))

    resolved = logging.getLevelName((level or "").upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    root = logging.getLogger()
    root.setLevel(resolved)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
