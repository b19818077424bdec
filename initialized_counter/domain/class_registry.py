"""Class name resolution and ignore matching.

Ignored classes are configured by name so they can live in settings files,
but matching happens against real classes with ``isinstance`` so that
ignoring a base class also ignores everything that inherits from it.

Names resolve, in order, against:

1. classes registered explicitly with a :class:`ClassRegistry`
   (the SQLAlchemy integration registers every mapped class),
2. a dotted import path, ``pkg.module.Class`` or ``pkg.module:Class``,
3. builtins, so ``"dict"`` works as expected.

A name that resolves nowhere is not an error; it is handed back to the
caller as a diagnostic.
"""

from __future__ import annotations

import builtins
import importlib
import logging
import threading
from typing import Iterable

logger = logging.getLogger(__name__)


class ClassRegistry:
    """Name -> class lookup for classes the host registers explicitly."""

    def __init__(self) -> None:
        self._classes: dict[str, type] = {}
        self._lock = threading.Lock()

    def register(self, cls: type, name: str | None = None) -> type:
        """Register ``cls`` under its ``__name__`` and qualified path.

        Returns the class so this can be used as a decorator.
        """
        with self._lock:
            self._classes[name or cls.__name__] = cls
            self._classes[f"{cls.__module__}.{cls.__qualname__}"] = cls
        return cls

    def unregister(self, cls: type) -> None:
        with self._lock:
            for key in [k for k, v in self._classes.items() if v is cls]:
                del self._classes[key]

    def get(self, name: str) -> type | None:
        return self._classes.get(name)

    def clear(self) -> None:
        with self._lock:
            self._classes.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._classes

    def resolve(self, name: str) -> type | None:
        """Resolve ``name`` to a class, or return None."""
        name = name.strip()
        if not name:
            return None

        registered = self.get(name)
        if registered is not None:
            return registered

        imported = _import_class(name)
        if imported is not None:
            return imported

        candidate = getattr(builtins, name, None)
        if isinstance(candidate, type):
            return candidate
        return None

    def resolve_all(self, names: Iterable[str | type]) -> tuple[list[type], list[str]]:
        """Resolve a mix of classes and names.

        Returns:
            ``(resolved, unresolved)``: the classes found, in input order and
            without duplicates, and the names that could not be resolved.
        """
        resolved: list[type] = []
        unresolved: list[str] = []

        for entry in names:
            cls = entry if isinstance(entry, type) else self.resolve(str(entry))
            if cls is None:
                unresolved.append(str(entry))
            elif cls not in resolved:
                resolved.append(cls)

        if unresolved:
            logger.warning("Ignoring unresolvable class names: %s", ", ".join(unresolved))
        return resolved, unresolved


def _import_class(path: str) -> type | None:
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    elif "." in path:
        module_name, _, attr_path = path.rpartition(".")
    else:
        return None

    # Relative or empty module names need a package anchor we don't have
    if not module_name or module_name.startswith(".") or not attr_path:
        return None

    try:
        obj = importlib.import_module(module_name)
    except (ImportError, ValueError, TypeError):
        return None

    for attr in attr_path.split("."):
        obj = getattr(obj, attr, None)
        if obj is None:
            return None
    return obj if isinstance(obj, type) else None


class IgnoreMatcher:
    """Answers whether an instance belongs to an ignored class or subclass."""

    def __init__(self, classes: Iterable[type] = ()) -> None:
        self._classes = tuple(classes)

    @property
    def classes(self) -> tuple[type, ...]:
        return self._classes

    def matches(self, obj: object) -> bool:
        return bool(self._classes) and isinstance(obj, self._classes)

    def __bool__(self) -> bool:
        return bool(self._classes)


# Process-wide registry used by the default configuration
class_registry = ClassRegistry()
