"""
Reporters receive the counts snapshot at the end of each unit of work.

A reporter is any callable taking one argument, a mapping of
type name -> {primary key: load count}. Its return value is ignored.
"""
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .errors import ConfigurationError


Reporter = Callable[[Mapping[str, Mapping[Any, int]]], Any]


def stdout_reporter(counts: Mapping[str, Mapping[Any, int]]) -> None:
    """Default reporter: print the snapshot."""
    print(counts)


class LoggingReporter:
    """Log every entity loaded at least ``threshold`` times in one unit of work."""

    def __init__(
        self,
        threshold: int = 2,
        logger: Optional[logging.Logger] = None,
        level: int = logging.WARNING,
    ):
        if threshold < 1:
            raise ConfigurationError(f"threshold must be >= 1, got {threshold}")
        self.threshold = threshold
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def __call__(self, counts: Mapping[str, Mapping[Any, int]]) -> None:
        for name, keys in counts.items():
            for key, loads in keys.items():
                if loads >= self.threshold:
                    self.logger.log(
                        self.level,
                        "%s %r initialized %d times in one unit of work",
                        name,
                        key,
                        loads,
                    )

    def __repr__(self) -> str:
        return f"LoggingReporter(threshold={self.threshold})"


_REPORTERS: Dict[str, Callable[[int], Reporter]] = {
    "stdout": lambda threshold: stdout_reporter,
    "log": lambda threshold: LoggingReporter(threshold=threshold),
}


def build_reporter(name: str, threshold: int = 2) -> Reporter:
    """Build a reporter from its settings name ("stdout" or "log")."""
    try:
        factory = _REPORTERS[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown reporter {name!r}; expected one of {sorted(_REPORTERS)}"
        ) from None
    return factory(threshold)
