"""Run a callback when a block is left."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator


@contextmanager
def run_when_out_of_scope(callback: Callable[[], object]) -> Iterator[None]:
    """Call ``callback`` when the ``with`` block ends, however it ends."""
    try:
        yield
    finally:
        callback()