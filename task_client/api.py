"""
HTTP client for the task API.

Maps four calls onto four HTTP requests against the task server:

    GET    /api/tasks        - fetch_tasks()
    POST   /api/tasks        - create_task(title)
    DELETE /api/tasks/<id>   - delete_task(task_id)
    PATCH  /api/tasks/<id>   - toggle_task(task_id, completed)

Every response is checked with ``requests.Response.ok``.  A non-ok
response is terminal for that call and surfaces as ``TaskApiError``
carrying a fixed, operation-specific message.  Transport failures
(``requests.RequestException``) are not translated and reach the
caller unchanged.

Key Concepts Demonstrated:
- Thin wrapper over ``requests`` with one helper for all HTTP traffic
- Compact JSON bodies so the wire format is byte-for-byte predictable
- Lazily-built module default client driven by class-based config
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from task_client.config import get_config
from task_client.models import Task

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"

JSON_HEADERS = {"Content-Type": "application/json"}

FETCH_FAILED = "Failed to fetch tasks"
CREATE_FAILED = "Failed to create task"
DELETE_FAILED = "Failed to delete task"
UPDATE_FAILED = "Failed to update task"


class TaskApiError(RuntimeError):
    """
    Raised when the task server answers with a non-ok status.

    ``str(error)`` is always the fixed message for the operation; the
    status code is kept as an attribute only.

    Attributes:
        operation: Name of the client call that failed (e.g. ``"fetch"``).
        status_code: HTTP status returned by the server.
    """

    def __init__(self, message: str, operation: str, status_code: int | None = None):
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code


# Default for TaskApiClient(timeout=...): read TASK_API_TIMEOUT from config.
CONFIGURED_TIMEOUT: Any = object()


def _encode(payload: Any) -> str:
    # Matches JSON.stringify: no whitespace after separators.
    return json.dumps(payload, separators=(",", ":"))


class TaskApiClient:
    """
    Client for a single task server.

    Holds only connection settings; no task data is cached between
    calls, so one instance can be shared freely.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: Any = CONFIGURED_TIMEOUT,
        session: requests.Session | None = None,
    ):
        """
        Args:
            base_url: Root URL of the task server.  Defaults to the
                configured ``TASK_API_URL``.
            timeout: Seconds to wait for a response; ``None`` waits
                forever.  When omitted, the configured
                ``TASK_API_TIMEOUT`` is used.
            session: Optional ``requests.Session`` to send through; the
                module-level ``requests.request`` is used otherwise.
        """
        settings = get_config()
        self.base_url = (base_url if base_url is not None else settings.TASK_API_URL).rstrip("/")
        self.timeout = settings.TASK_API_TIMEOUT if timeout is CONFIGURED_TIMEOUT else timeout
        self.session = session

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _item_path(self, task_id: Any) -> str:
        return f"{TASKS_PATH}/{task_id}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """
        Send one request to the task server.

        Args:
            method: HTTP method (``"GET"``, ``"POST"``, ...).
            path: Path below the server root (e.g. ``"/api/tasks"``).
            **kwargs: Forwarded to ``requests.request`` (``headers``,
                ``data``).

        Returns:
            The raw ``requests.Response``; status is not checked here.

        Raises:
            requests.RequestException: For network-level failures.
        """
        url = self._url(path)
        logger.debug("%s %s", method, url)
        send = self.session.request if self.session is not None else requests.request
        return send(method=method, url=url, timeout=self.timeout, **kwargs)

    def _check(self, response: requests.Response, operation: str, message: str) -> None:
        if response.ok:
            return
        logger.warning("Task API %s failed with status %s", operation, response.status_code)
        raise TaskApiError(message, operation=operation, status_code=response.status_code)

    def fetch_tasks(self) -> list[Task]:
        """
        Return every task, in the order the server lists them.

        Raises:
            TaskApiError: ``"Failed to fetch tasks"`` on a non-ok response.
        """
        response = self._request("GET", TASKS_PATH)
        self._check(response, "fetch", FETCH_FAILED)
        return response.json()

    def create_task(self, title: str) -> Task:
        """
        Create a task and return it as stored by the server.

        The request body is the title itself, JSON-encoded as a string.

        Args:
            title: Title of the new task.

        Raises:
            TaskApiError: ``"Failed to create task"`` on a non-ok response.
        """
        response = self._request("POST", TASKS_PATH, headers=dict(JSON_HEADERS), data=_encode(title))
        self._check(response, "create", CREATE_FAILED)
        return response.json()

    def delete_task(self, task_id: Any) -> None:
        """
        Delete a task.  The response body is ignored.

        Raises:
            TaskApiError: ``"Failed to delete task"`` on a non-ok response.
        """
        response = self._request("DELETE", self._item_path(task_id))
        self._check(response, "delete", DELETE_FAILED)

    def toggle_task(self, task_id: Any, completed: bool) -> Task:
        """
        Set the completion flag of a task.

        Args:
            task_id: Identifier of the task to update.
            completed: New value of the flag.

        Returns:
            The updated task as returned by the server.

        Raises:
            TaskApiError: ``"Failed to update task"`` on a non-ok response.
        """
        response = self._request(
            "PATCH",
            self._item_path(task_id),
            headers=dict(JSON_HEADERS),
            data=_encode({"completed": completed}),
        )
        self._check(response, "update", UPDATE_FAILED)
        return response.json()


_default_client: TaskApiClient | None = None


def get_default_client() -> TaskApiClient:
    """Return the shared client, building it from the active config on first use."""
    global _default_client
    if _default_client is None:
        _default_client = TaskApiClient()
    return _default_client


def reset_default_client() -> None:
    """Drop the shared client so the next call re-reads configuration."""
    global _default_client
    _default_client = None


def fetch_tasks() -> list[Task]:
    """List all tasks using the shared client."""
    return get_default_client().fetch_tasks()


def create_task(title: str) -> Task:
    """Create a task using the shared client."""
    return get_default_client().create_task(title)


def delete_task(task_id: Any) -> None:
    """Delete a task using the shared client."""
    get_default_client().delete_task(task_id)


def toggle_task(task_id: Any, completed: bool) -> Task:
    """Set a task's completed flag using the shared client."""
    return get_default_client().toggle_task(task_id, completed)
