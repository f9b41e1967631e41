"""Logging configuration for the report renderer."""

from __future__ import annotations

import logging
import sys

_STDERR_FORMAT = "%(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"


def setup_logging(
    verbose: bool | None = False,
    log_file: str | None = None,
) -> None:
    """Configure the ``plant_report`` logger hierarchy.

    Parameters
    ----------
    verbose:
        Level of the stderr handler: DEBUG for *True*, WARNING for *False*
        (quiet, for the CLI), INFO for *None*.
    log_file:
        If given, also append to this file.  The file always receives at
        least INFO, so each render leaves its summary line ("Rendered ...",
        "Saved report surface ...") even when stderr stays quiet.
    """
    if verbose is True:
        level = logging.DEBUG
    elif verbose is False:
        level = logging.WARNING
    else:
        level = logging.INFO
    file_level = min(level, logging.INFO)

    logger = logging.getLogger("plant_report")
    logger.setLevel(file_level if log_file else level)

    # Called once per CLI invocation; tests call it repeatedly
    if logger.handlers:
        return

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(logging.Formatter(_STDERR_FORMAT))
    logger.addHandler(stderr_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
