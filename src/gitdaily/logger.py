# SPDX-License-Identifier: MIT

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEBUG_ENV_VAR = "GITDAILY_DEBUG"
LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """
    Send log records to stderr through rich. GITDAILY_DEBUG=1 forces DEBUG.
    """
    if os.environ.get(DEBUG_ENV_VAR) == "1":
        level = "DEBUG"

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
