"""Structured logging configuration for the sitexml command line."""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(log_level: str = "INFO", *, json: bool = True) -> None:
    """Configure the root logger to write to stderr.

    JSON output is the default so log lines can be shipped as-is; ``json=False``
    switches to a plain single-line format for interactive use. Standard output
    is left to command results.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    if json:
        formatter: logging.Formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "levelname": "level",
                "name": "logger",
            },
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    # urllib3 logs every connection at DEBUG; keep it quieter than ours.
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
