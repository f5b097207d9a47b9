# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Console logging setup for command-line entry points.

Library modules only create named loggers; handlers are installed here.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Install a console handler on the ``militaryapps`` logger.

    Calling twice replaces the handler rather than adding a second one.
    """
    package_logger = logging.getLogger("militaryapps")
    package_logger.setLevel(getattr(logging, level.upper()))

    for handler in list(package_logger.handlers):
        if getattr(handler, "_militaryapps_console", False):
            package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    console_handler._militaryapps_console = True
    package_logger.addHandler(console_handler)
