"""Debug-level timing of external commands."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def timed_operation(description: str) -> Iterator[None]:
    """Log the start and the elapsed time of an operation at DEBUG level.

    Completion is logged even when the body raises.
    """
    logger.debug("Starting: %s", description)
    start = time.monotonic()
    try:
        yield
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.debug("Completed in %.0fms: %s", elapsed_ms, description)
