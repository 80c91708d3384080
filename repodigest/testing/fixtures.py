"""
Pytest fixtures and builders for RepoDigest SDK testing.
"""

from typing import Any, Generator

import pytest

from repodigest.controller import AgentInvocationController
from repodigest.testing.mock import MockAgentInvoker
from repodigest.types.agents import AgentDirectory, AgentResult
from repodigest.types.repos import Commit, Repository


# ============================================================================
# Result Builders
# ============================================================================


def repositories_result(repositories: list[Any]) -> AgentResult:
    """Successful data-agent result carrying ``repositories``."""
    return AgentResult.ok({"result": {"repositories": repositories}})


def email_result(status: str, message: str = "", recipient: str = "") -> AgentResult:
    """Successful manager-agent result carrying an email receipt."""
    return AgentResult.ok(
        {"result": {"status": status, "message": message, "recipient": recipient}}
    )


def failure_result(error: str | None = None) -> AgentResult:
    """Failed agent result."""
    return AgentResult.failure(error)


def create_repository_payload(name: str = "test-repo", **kwargs: Any) -> dict[str, Any]:
    """
    Create a raw repository payload as the data agent returns it.

    Args:
        name: Repository name
        **kwargs: Additional camelCase fields to override
    """
    payload: dict[str, Any] = {
        "name": name,
        "description": "A repository for testing",
        "language": "Python",
        "stars": 7,
        "lastUpdated": "2024-01-15T10:30:00Z",
        "commits": [
            {
                "message": "Initial commit",
                "author": "tester",
                "timestamp": "2024-01-15T10:00:00Z",
            }
        ],
    }
    payload.update(kwargs)
    return payload


def create_mock_repository(name: str = "test-repo", **kwargs: Any) -> Repository:
    """
    Create a Repository with customizable fields.

    Args:
        name: Repository name
        **kwargs: Additional fields to override

    Returns:
        Repository object
    """
    defaults: dict[str, Any] = {
        "description": "A repository for testing",
        "language": "Python",
        "stars": 7,
        "last_updated": "2024-01-15T10:30:00Z",
        "commits": [Commit("Initial commit", "tester", "2024-01-15T10:00:00Z")],
    }
    defaults.update(kwargs)
    return Repository(name=name, **defaults)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def agent_directory() -> AgentDirectory:
    """Provide the default agent directory."""
    return AgentDirectory()


@pytest.fixture
def mock_invoker() -> Generator[MockAgentInvoker, None, None]:
    """
    Provide a MockAgentInvoker for testing.

    Example:
        ```python
        def test_my_feature(mock_invoker, agent_directory):
            mock_invoker.configure(agent_directory.manager, result=email_result("sent"))
        ```
    """
    invoker = MockAgentInvoker()
    yield invoker
    invoker.reset()


@pytest.fixture
def controller(
    mock_invoker: MockAgentInvoker, agent_directory: AgentDirectory
) -> AgentInvocationController:
    """Provide a controller wired to ``mock_invoker``."""
    return AgentInvocationController(mock_invoker, agents=agent_directory)


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository object."""
    return create_mock_repository()


@pytest.fixture
def sample_repository_payload() -> dict[str, Any]:
    """Provide a sample raw repository payload."""
    return create_repository_payload()
