"""Per-unit-of-work state held in context variables.

Each thread starts with its own context and each asyncio task runs in a
copy of the context it was created from, so a value stored here is only
visible to the unit of work that stored it. ``reset()`` always installs a
brand new counts map; mutating a map inherited from a parent context would
let sibling tasks see each other's counts.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional

Counts = Dict[str, Dict[Any, int]]

_counts: ContextVar[Optional[Counts]] = ContextVar("initialized_counter_counts", default=None)
_disabled: ContextVar[bool] = ContextVar("initialized_counter_disabled", default=False)


def counts() -> Counts:
    """Return the current scope's counts, creating an empty map on first use."""
    current = _counts.get()
    if current is None:
        current = {}
        _counts.set(current)
    return current


def reset() -> None:
    """Start the current scope over with an empty counts map."""
    _counts.set({})


def snapshot() -> Counts:
    """Copy of the current counts that reporters may keep or mutate."""
    return {name: dict(keys) for name, keys in counts().items()}


def is_disabled() -> bool:
    return _disabled.get()


def set_disabled(value: bool) -> None:
    _disabled.set(value)


@contextmanager
def disabled_scope() -> Iterator[None]:
    """Disable counting for the current scope only, restoring the prior flag on exit."""
    token = _disabled.set(True)
    try:
        yield
    finally:
        _disabled.reset(token)
