"""Entity identity: type name and primary key discovery.

Any class can take part in counting by declaring ``__primary_key__``::

    class Invoice:
        __primary_key__ = "number"

A tuple declares a composite key. Classes mapped by SQLAlchemy need no
declaration; their mapper's primary key columns are used. Classes with
neither are not identity-bearing and are never counted.
"""

from __future__ import annotations

import functools
from typing import Any, ClassVar, Protocol, runtime_checkable

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import NoInspectionAvailable

PrimaryKeyAttrs = tuple[str, ...]

_MISSING = object()


@runtime_checkable
class Identifiable(Protocol):
    """A class that names its own primary key attribute(s)."""

    __primary_key__: ClassVar[str | tuple[str, ...] | None]


def type_name(entity: object) -> str:
    return type(entity).__name__


@functools.lru_cache(maxsize=None)
def primary_key_attributes(cls: type) -> PrimaryKeyAttrs | None:
    """Return the attribute names holding ``cls``'s primary key, or None.

    Cached per class; runs on every ORM load.
    """
    declared = getattr(cls, "__primary_key__", _MISSING)
    if declared is not _MISSING:
        if not declared:
            return None
        if isinstance(declared, str):
            return (declared,)
        return tuple(declared)

    try:
        mapper = sa_inspect(cls, raiseerr=False)
    except NoInspectionAvailable:
        return None
    if mapper is None or not hasattr(mapper, "primary_key"):
        return None

    attrs = tuple(mapper.get_property_by_column(column).key for column in mapper.primary_key)
    return attrs or None


def primary_key_value(entity: object, attrs: PrimaryKeyAttrs) -> Any:
    """Read the primary key; composite keys come back as a tuple."""
    if len(attrs) == 1:
        return getattr(entity, attrs[0])
    return tuple(getattr(entity, attr) for attr in attrs)
