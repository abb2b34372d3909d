"""Timing and memory profiling helpers."""
import logging
import os
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

import psutil

logger = logging.getLogger(__name__)


@contextmanager
def timing_context(label: str, log: Optional[logging.Logger] = None) -> Iterator[Dict[str, float]]:
    """Log the wall time spent inside the block.
    
    Yields a dict that receives ``elapsed`` (seconds) on exit.
    """
    log = log or logger
    stats: Dict[str, float] = {}
    start = time.perf_counter()
    try:
        yield stats
    finally:
        stats['elapsed'] = time.perf_counter() - start
        log.info(f"{label} took {stats['elapsed'] * 1000:.2f} ms")


@contextmanager
def memory_profiler(label: str, log: Optional[logging.Logger] = None) -> Iterator[Dict[str, int]]:
    """Log the change in process resident memory across the block.
    
    Yields a dict that receives ``rss_before``, ``rss_after`` and
    ``rss_delta`` (bytes) on exit.
    """
    log = log or logger
    process = psutil.Process(os.getpid())
    stats: Dict[str, int] = {'rss_before': process.memory_info().rss}
    try:
        yield stats
    finally:
        stats['rss_after'] = process.memory_info().rss
        stats['rss_delta'] = stats['rss_after'] - stats['rss_before']
        log.info(f"{label} memory: {stats['rss_after'] / 1024**2:.1f}MB RSS "
                 f"({stats['rss_delta'] / 1024:+.1f}KB)")
