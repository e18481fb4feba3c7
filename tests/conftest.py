"""Test configuration and fixtures for ichor."""

from tests.fixtures import *  # noqa: F401,F403
