"""Runtime configuration shared by every unit of work in the process."""

from __future__ import annotations

from typing import Iterable

from initialized_counter.config.settings import CounterSettings
from initialized_counter.domain.class_registry import ClassRegistry, IgnoreMatcher, class_registry
from initialized_counter.errors import ConfigurationError
from initialized_counter.reporters import Reporter, build_reporter, stdout_reporter


class CounterConfig:
    """Mutable process-wide settings: global disable flag, reporter, ignored classes.

    Mutate it through ``initialized_counter.configure``::

        def _setup(config):
            config.reporter = my_reporter
            config.ignored_classes = ["AuditLog", "myapp.models:Setting"]

        initialized_counter.configure(_setup)
    """

    def __init__(self, registry: ClassRegistry | None = None) -> None:
        self.registry = registry or class_registry
        self.disabled: bool = False
        self._reporter: Reporter | None = None
        self._matcher = IgnoreMatcher()
        self.unresolved_ignored_classes: list[str] = []

    @classmethod
    def from_settings(
        cls, settings: CounterSettings, registry: ClassRegistry | None = None
    ) -> "CounterConfig":
        config = cls(registry=registry)
        config.disabled = settings.disabled
        if settings.reporter.strip().lower() != "stdout":
            config.reporter = build_reporter(settings.reporter, settings.log_threshold)
        config.ignored_classes = settings.ignored_classes_list
        return config

    # ── Reporter ─────────────────────────────────────────────────────────

    @property
    def reporter(self) -> Reporter:
        """Configured reporter, falling back to printing the snapshot."""
        return self._reporter or stdout_reporter

    @reporter.setter
    def reporter(self, reporter: Reporter | None) -> None:
        if reporter is not None and not callable(reporter):
            raise ConfigurationError(f"reporter must be callable, got {reporter!r}")
        self._reporter = reporter

    # ── Ignored classes ──────────────────────────────────────────────────

    @property
    def ignored_classes(self) -> list[type]:
        return list(self._matcher.classes)

    @ignored_classes.setter
    def ignored_classes(self, names: Iterable[str | type]) -> None:
        self.set_ignored_classes(names)

    def set_ignored_classes(self, names: Iterable[str | type]) -> list[str]:
        """Replace the ignored classes and return the names that did not resolve."""
        resolved, unresolved = self.registry.resolve_all(names)
        self._matcher = IgnoreMatcher(resolved)
        self.unresolved_ignored_classes = unresolved
        return unresolved

    def is_ignored(self, entity: object) -> bool:
        return self._matcher.matches(entity)
