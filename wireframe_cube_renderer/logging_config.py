#
# PROJECT: wireframe-cube-renderer
# MODULE: wireframe_cube_renderer/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import logging.handlers
import sys
from contextlib import contextmanager
from typing import Optional

LOGGER_NAME = "wireframe_cube_renderer"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'wireframe_cube_renderer' namespace.

    With a log file, records go only to that file so they do not scribble
    over the curses screen; otherwise they go to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_file:
        handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.debug("Logging initialized.")
    return logger


@contextmanager
def hold_console_output(capacity: int = 10000):
    """
    Buffer records bound for stderr while curses owns the terminal.

    Each stderr handler on the package logger is swapped for a MemoryHandler
    targeting it; the buffer is written out and the original handlers are
    put back on exit. File handlers are left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    original = list(logger.handlers)
    swapped = []
    for handler in original:
        if isinstance(handler, logging.FileHandler) or \
                getattr(handler, 'stream', None) is not sys.stderr:
            swapped.append(handler)
            continue
        buffer = logging.handlers.MemoryHandler(
            capacity, flushLevel=logging.CRITICAL + 1, target=handler)
        buffer.setLevel(handler.level)
        swapped.append(buffer)
    logger.handlers[:] = swapped
    try:
        yield
    finally:
        logger.handlers[:] = original
        for handler in swapped:
            if isinstance(handler, logging.handlers.MemoryHandler):
                handler.flush()
                handler.close()
