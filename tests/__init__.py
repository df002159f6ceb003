"""
Test suite for the task API client.

This package contains:
- unit/: request/response contract tests against a patched ``requests``
- integration/: the real client against a live stub task server
"""
