"""
Task Client package.

A thin HTTP client for a remote task list: fetch, create, delete and
toggle tasks against ``/api/tasks``.  The module-level functions use a
shared client configured from the environment (see
:mod:`task_client.config`); build a :class:`TaskApiClient` directly to
talk to a specific server.
"""

from __future__ import annotations

from task_client.api import (
    TaskApiClient,
    TaskApiError,
    create_task,
    delete_task,
    fetch_tasks,
    toggle_task,
)
from task_client.models import Task

__all__ = [
    "Task",
    "TaskApiClient",
    "TaskApiError",
    "create_task",
    "delete_task",
    "fetch_tasks",
    "toggle_task",
]
