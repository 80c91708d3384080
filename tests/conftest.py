"""Shared fixtures for the RepoDigest test suite."""

from repodigest.testing.fixtures import (  # noqa: F401
    agent_directory,
    controller,
    mock_invoker,
    sample_repository,
    sample_repository_payload,
)
