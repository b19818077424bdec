"""SQLAlchemy lifecycle hook.

Hooks into the ORM ``load`` instance event, which fires once each time a
row is turned into a new mapped instance. Pending and transient objects
never fire it, so only persisted entities are counted.

Usage::

    from app.database import Base
    from initialized_counter.integrations.sqlalchemy import instrument

    instrument(Base)
"""

from __future__ import annotations

import logging

from sqlalchemy import event

from initialized_counter import counter
from initialized_counter.domain.class_registry import ClassRegistry

logger = logging.getLogger(__name__)


def _on_load(target, context):
    counter.count(target)


def instrument(base: type, registry: ClassRegistry | None = None) -> None:
    """Count every instance of ``base``'s mapped subclasses loaded from the database.

    Mapped classes are also registered by name so ignored classes can be
    configured as bare model names. Safe to call more than once.
    """
    registry = registry or counter.get_config().registry
    for mapper in _mappers_of(base):
        registry.register(mapper.class_)

    if event.contains(base, "load", _on_load):
        return
    event.listen(base, "load", _on_load, propagate=True)
    logger.debug("Instrumented %s for initialized counting", base.__name__)


def uninstrument(base: type) -> None:
    """Remove the load hook installed by :func:`instrument`."""
    if not event.contains(base, "load", _on_load):
        return
    event.remove(base, "load", _on_load)
    logger.debug("Removed initialized counting from %s", base.__name__)


def _mappers_of(base: type):
    registry = getattr(base, "registry", None)
    if registry is None:
        return []
    return list(registry.mappers)
