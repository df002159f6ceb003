"""
Task Client — Configuration.

Defines environment-specific configuration classes for the task API
client.  Each class captures the root URL of the task server and the
request timeout handed to ``requests``.  The ``get_config`` factory
selects the right class based on the ``TASK_CLIENT_ENV`` environment
variable (or an explicit key).

Key Concepts Demonstrated:
- Class-based configuration with inheritance for DRY defaults
- Environment-variable overrides for 12-factor deployability
- Separate testing configuration with a non-routable server URL
"""

from __future__ import annotations

import os


def _timeout_from_env(name: str) -> float | None:
    """
    Read an optional timeout (seconds) from the environment.

    Args:
        name: Environment variable to read.

    Returns:
        The timeout as a float, or ``None`` when the variable is unset
        or blank (``requests`` then waits indefinitely).
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    return float(raw)


class Config:
    """
    Base (shared) configuration for the task client.

    Individual settings can be overridden by environment variables,
    following 12-factor app conventions.
    """

    # Root URL of the task server; the collection lives at /api/tasks.
    TASK_API_URL: str = os.environ.get("TASK_API_URL", "http://localhost:5000")

    # None means no timeout: a slow server blocks the caller.
    TASK_API_TIMEOUT: float | None = _timeout_from_env("TASK_API_TIMEOUT")


class DevelopmentConfig(Config):
    """Local development against a task server on localhost."""


class TestingConfig(Config):
    """
    Test-suite overrides.

    Points the server URL at a non-routable test host so that unit
    tests never accidentally hit a real task server.
    """

    TASK_API_URL: str = os.environ.get("TEST_TASK_API_URL", "http://tasks.test")
    TASK_API_TIMEOUT: float | None = _timeout_from_env("TEST_TASK_API_TIMEOUT")


class ProductionConfig(Config):
    """
    Production overrides.

    All values are expected to come from environment variables set by
    the deployment.
    """


# Lookup table mapping environment name strings to their config classes.
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Return the configuration class for the given environment.

    Args:
        env: One of ``"development"``, ``"testing"``, or
            ``"production"``.  When *None*, the ``TASK_CLIENT_ENV``
            environment variable is consulted, falling back to
            ``"development"`` if unset.

    Returns:
        The ``Config`` subclass matching the requested environment,
        or ``DevelopmentConfig`` if the key is unrecognised.
    """
    if env is None:
        env = os.environ.get("TASK_CLIENT_ENV", "development")
    return config.get(env, config["default"])
