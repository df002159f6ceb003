"""
Shared pytest fixtures for the task client test suite.

The client's only collaborator is the task server, reached through
``requests.request``.  Unit tests replace that call with a capturing
fake so that no real HTTP traffic is generated; the captured keyword
arguments are then inspected to confirm method, URL, headers and body.

Key SDET Concepts Demonstrated:
- Environment variable overrides applied before the code under test loads
- Monkeypatching to replace I/O-bound dependencies with fakes
- Lightweight stub objects that satisfy the interface contract
- Test data generation with Faker
"""

from __future__ import annotations

import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing the client
os.environ["TASK_CLIENT_ENV"] = "testing"
os.environ["TEST_TASK_API_URL"] = "http://tasks.test"
os.environ["TEST_TASK_API_TIMEOUT"] = ""

from task_client import api


fake = Faker()

_NO_BODY = object()


class FakeResponse:
    """Minimal stand-in for ``requests.Response`` as used by the client."""

    def __init__(self, status_code: int = 200, payload: Any = _NO_BODY):
        self.status_code = status_code
        self.ok = status_code < 400
        self._payload = payload

    def json(self) -> Any:
        if self._payload is _NO_BODY:
            raise ValueError("response has no JSON body")
        return self._payload


class RequestRecorder:
    """
    Replacement for ``requests.request`` that records every call.

    Attributes:
        calls: Keyword arguments of each call, in order.
        response: The ``FakeResponse`` handed back to the client.
    """

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self.response = FakeResponse()

    def __call__(self, **kwargs) -> FakeResponse:
        self.calls.append(kwargs)
        return self.response

    def respond(self, status_code: int = 200, payload: Any = _NO_BODY) -> None:
        self.response = FakeResponse(status_code, payload)

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


# -----------------------------------------------------------------------------
# Client Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def fresh_default_client():
    """Rebuild the module default client for every test."""
    api.reset_default_client()
    yield
    api.reset_default_client()


@pytest.fixture
def http(monkeypatch) -> RequestRecorder:
    """
    Patch ``requests.request`` inside the client module.

    Returns:
        The recorder; configure its reply with ``respond()``.
    """
    recorder = RequestRecorder()
    monkeypatch.setattr("task_client.api.requests.request", recorder)
    return recorder


# -----------------------------------------------------------------------------
# Data Fixtures
# -----------------------------------------------------------------------------

def make_task(task_id: str | None = None, title: str | None = None, completed: bool = False) -> dict:
    """Build a task payload shaped like the server's JSON."""
    return {
        "id": task_id if task_id is not None else str(fake.random_int(min=1, max=9999)),
        "title": title if title is not None else fake.sentence(nb_words=3).rstrip("."),
        "completed": completed,
    }


@pytest.fixture
def sample_tasks() -> list[dict]:
    """Two tasks, the second already completed."""
    return [
        make_task("1", "Task 1", completed=False),
        make_task("2", "Task 2", completed=True),
    ]
