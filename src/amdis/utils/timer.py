import logging
import time
from contextlib import contextmanager
from typing import Generator

logger = logging.getLogger(__name__)


@contextmanager
def measure_time(label: str, level: int = logging.INFO) -> Generator[None, None, None]:
    """
    Log how long the wrapped block took, using time.perf_counter.

    Usage:
    with measure_time("MSL parse"):
        records = extract_records(text)
    """
    start_time = time.perf_counter()
    try:
        yield
    finally:
        elapsed_time = time.perf_counter() - start_time
        logger.log(level, f"Time for {label}: {elapsed_time:.6f} seconds")
