"""Counting engine and report lifecycle.

One unit of work (a request, a job) is wrapped in ``count_and_report``.
While it runs, the ORM hook calls ``count(entity)`` for every persisted
entity it loads. When it finishes, the reporter receives the counts, e.g.
``{"User": {1: 3, 2: 1}}`` when user 1 was loaded three times.
"""

from __future__ import annotations

import functools
import inspect
import logging
import threading
from typing import Any, Awaitable, Callable, Optional, TypeVar

from initialized_counter import state
from initialized_counter.config import CounterConfig, settings
from initialized_counter.domain.identity import primary_key_attributes, primary_key_value, type_name
from initialized_counter.reporters import Reporter

logger = logging.getLogger(__name__)

T = TypeVar("T")

_config = CounterConfig.from_settings(settings)
_config_lock = threading.Lock()


# ── Configuration ────────────────────────────────────────────────────────


def configure(mutator: Callable[[CounterConfig], Any]) -> None:
    """Call ``mutator`` with the live configuration."""
    with _config_lock:
        mutator(_config)


def get_config() -> CounterConfig:
    return _config


def disabled() -> bool:
    """True when counting is off globally or for the current scope."""
    return _config.disabled is True or state.is_disabled()


def enabled() -> bool:
    return not disabled()


def disable(fn: Optional[Callable[..., T]] = None, *args: Any, **kwargs: Any) -> Optional[T]:
    """Switch counting off.

    Without arguments the global flag is set until ``enable()``. With a
    callable, only the current scope is disabled while it runs and the
    callable's result is returned.
    """
    if fn is None:
        _config.disabled = True
        logger.debug("Initialized counting disabled globally")
        return None

    with state.disabled_scope():
        return fn(*args, **kwargs)


disabled_scope = state.disabled_scope


def enable() -> None:
    """Clear both the global flag and the current scope's flag."""
    _config.disabled = False
    state.set_disabled(False)
    logger.debug("Initialized counting enabled")


def get_reporter() -> Reporter:
    return _config.reporter


def set_reporter(reporter: Optional[Reporter]) -> None:
    _config.reporter = reporter


# ── Scoped counts ────────────────────────────────────────────────────────


counts = state.counts
reset = state.reset


def count(entity: object) -> Optional[int]:
    """Record one initialization of ``entity``; return its running count.

    Returns None without touching any state when counting is disabled, the
    entity's class is ignored, or the class has no primary key.
    """
    if disabled():
        return None
    if _config.is_ignored(entity):
        return None

    attrs = primary_key_attributes(type(entity))
    if attrs is None:
        return None

    key = primary_key_value(entity, attrs)
    per_type = state.counts().setdefault(type_name(entity), {})
    per_type[key] = per_type.get(key, 0) + 1
    return per_type[key]


# ── Reporting ────────────────────────────────────────────────────────────


def report() -> None:
    """Hand the current counts to the reporter unless counting is disabled."""
    if disabled():
        return None

    _config.reporter(state.snapshot())
    return None


def count_and_report(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run ``fn`` as one unit of work and report its counts.

    Counts are reset first. The report runs whether ``fn`` returns or
    raises, so loads that happened before a failure are still visible;
    the failure itself propagates unchanged.
    """
    reset()
    try:
        return fn(*args, **kwargs)
    finally:
        report()


async def acount_and_report(fn: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
    """``count_and_report`` for coroutine functions."""
    reset()
    try:
        return await fn(*args, **kwargs)
    finally:
        report()


def counted(fn: Callable[..., T]) -> Callable[..., T]:
    """Decorate a job function so each call is counted and reported.

    Example:
        @counted
        def rebuild_search_index(batch_id):
            ...
    """
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args, **kwargs):
            return await acount_and_report(fn, *args, **kwargs)

        return async_wrapper

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        return count_and_report(fn, *args, **kwargs)

    return wrapper
