"""
Integration test package for the task API client.

Tests here start a stub task server and send real HTTP requests to it.
"""
