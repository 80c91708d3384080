"""RepoDigest SDK testing utilities.

Provides a mock invoker, result builders and fixtures for testing code
that drives the dashboard controller.
"""

from repodigest.testing.fixtures import (
    create_mock_repository,
    create_repository_payload,
    email_result,
    failure_result,
    repositories_result,
)
from repodigest.testing.mock import MockAgentInvoker, MockCall, MockResponse

__all__ = [
    # Mock invoker
    "MockAgentInvoker",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
    "create_repository_payload",
    "repositories_result",
    "email_result",
    "failure_result",
]
