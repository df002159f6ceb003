"""
Task client data models.

The task server owns the shape of a task; the client only passes the
parsed JSON through.  ``Task`` documents that contract for type
checkers without wrapping the payload, so callers receive exactly what
the server sent.
"""

from __future__ import annotations

from typing import TypedDict


class Task(TypedDict):
    """
    A to-do item as returned by the task API.

    Attributes:
        id: Server-assigned identifier.
        title: Human-readable task title.
        completed: Whether the task has been done.
    """

    id: str
    title: str
    completed: bool
