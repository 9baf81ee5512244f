"""Test configuration: every fixture under tests/fixtures is available."""

from tests.fixtures import *  # noqa: F401,F403
