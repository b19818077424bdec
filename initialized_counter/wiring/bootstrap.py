"""Host bootstrap: the single place that plugs the counter into an application.

Every argument is optional, so a web-only or worker-only process wires just
the pieces it has::

    from initialized_counter.wiring.bootstrap import install

    install(app=app, base=Base)            # FastAPI process
    install(base=Base, celery_app=celery)  # Celery worker
"""

from __future__ import annotations

import logging
from typing import Any

from initialized_counter.domain.class_registry import ClassRegistry
from initialized_counter.integrations import sqlalchemy as sqlalchemy_integration
from initialized_counter.integrations.asgi import InitializedCounterMiddleware

logger = logging.getLogger(__name__)


def install(
    app: Any = None,
    base: type | None = None,
    celery_app: Any = None,
    registry: ClassRegistry | None = None,
) -> None:
    """Wire request middleware, ORM load hook and Celery task base.

    Args:
        app: FastAPI/Starlette application; gets ``InitializedCounterMiddleware``.
        base: SQLAlchemy declarative base whose mapped subclasses are counted.
        celery_app: Celery application; ``CountedTask`` is mixed into its default
            task class, keeping any custom ``task_cls`` the host configured.
            Tasks declared before this call keep their class.
        registry: Class registry for mapped model names (defaults to the global one).
    """
    if base is not None:
        sqlalchemy_integration.instrument(base, registry=registry)

    if app is not None:
        app.add_middleware(InitializedCounterMiddleware)
        logger.debug("Added InitializedCounterMiddleware to %r", app)

    if celery_app is not None:
        _install_task_base(celery_app)


def _install_task_base(celery_app: Any) -> None:
    """Mix ``CountedTask`` into the app's configured task base."""
    from celery.utils.imports import symbol_by_name

    from initialized_counter.integrations.celery import CountedTask

    base = symbol_by_name(celery_app.task_cls)
    if issubclass(CountedTask, base):
        base = CountedTask
    elif not issubclass(base, CountedTask):
        base = type(
            CountedTask.__name__,
            (CountedTask, base),
            {"__module__": CountedTask.__module__},
        )

    celery_app.task_cls = base
    celery_app.Task = celery_app.create_task_cls()
    logger.debug("Mixed CountedTask into the default task class for %s", celery_app.main)
