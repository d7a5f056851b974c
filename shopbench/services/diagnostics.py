import gc

import psutil


def used_memory_kb() -> int:
    """Full collection first, then resident set size of this process."""
    gc.collect()
    return psutil.Process().memory_info().rss // 1024
