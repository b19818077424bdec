"""Celery task base class that treats each task run as one unit of work.

Usage, per task::

    @celery_app.task(base=CountedTask)
    def refresh_prices(symbol):
        ...

or for every task of an app::

    celery_app = Celery("worker", task_cls=CountedTask)
"""

from __future__ import annotations

from celery import Task

from initialized_counter import counter


class CountedTask(Task):
    """Count and report entity loads for each execution of the task body."""

    def __call__(self, *args, **kwargs):
        return counter.count_and_report(super().__call__, *args, **kwargs)
