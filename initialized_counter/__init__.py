"""Count how often each persisted entity is initialized per request or job.

Typical setup::

    import initialized_counter
    from initialized_counter.wiring.bootstrap import install

    install(app=fastapi_app, base=Base, celery_app=celery_app)
    initialized_counter.configure(lambda c: setattr(c, "ignored_classes", ["AuditLog"]))
"""

from .config import CounterConfig
from .counter import (
    acount_and_report,
    configure,
    count,
    count_and_report,
    counted,
    counts,
    disable,
    disabled,
    disabled_scope,
    enable,
    enabled,
    get_config,
    get_reporter,
    report,
    reset,
    set_reporter,
)
from .domain import Identifiable, class_registry
from .errors import ConfigurationError, InitializedCounterError
from .reporters import LoggingReporter, stdout_reporter

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CounterConfig",
    "Identifiable",
    "InitializedCounterError",
    "LoggingReporter",
    "acount_and_report",
    "class_registry",
    "configure",
    "count",
    "count_and_report",
    "counted",
    "counts",
    "disable",
    "disabled",
    "disabled_scope",
    "enable",
    "enabled",
    "get_config",
    "get_reporter",
    "report",
    "reset",
    "set_reporter",
    "stdout_reporter",
]
