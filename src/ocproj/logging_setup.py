"""
Logging configuration for ocproj.

Provides a console handler on stderr (WARNING by default, DEBUG when
debugging) and an optional DEBUG file handler.  Standard output is
never used for log records.
"""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["setup_logging"]


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure the root logger.

    - Console handler: WARNING+ by default.  When *verbose* is True the
      console level drops to DEBUG and records carry time and logger name.
    - File handler: only when *log_file* is given; always DEBUG.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # main may run more than once in a process; start from a clean root.
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_fmt = logging.Formatter(
        "%(levelname)-8s  %(message)s" if not verbose
        else "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(console_fmt)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root_logger.addHandler(file_handler)
