"""Helpers for per-pick time limits and banner timing."""

import time


def deadline_after(seconds):
    if seconds is None:
        return None
    return time.time() + seconds


def elapsed_ms(start, clock=time.monotonic):
    return (clock() - start) * 1000.0
