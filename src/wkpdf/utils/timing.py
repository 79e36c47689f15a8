#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wkpdf/utils/timing.py
"""Timing helpers for DEBUG-level logging."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering (html)")

    Notes
    -----
    Nothing is measured or logged when DEBUG is disabled for ``logger``. If the
    block raises, the exception propagates and no timing is logged.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
