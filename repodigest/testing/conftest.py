"""
Pytest plugin for RepoDigest SDK testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["repodigest.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from repodigest.testing.fixtures import (
    agent_directory,
    controller,
    mock_invoker,
    sample_repository,
    sample_repository_payload,
)

__all__ = [
    "agent_directory",
    "controller",
    "mock_invoker",
    "sample_repository",
    "sample_repository_payload",
]
