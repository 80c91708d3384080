"""RepoDigest SDK type definitions.

This module exports all data model types used by the SDK.
"""

from repodigest.types.agents import (
    EMAIL_COMPOSER_AGENT_ID,
    GITHUB_DATA_AGENT_ID,
    MANAGER_AGENT_ID,
    AgentDirectory,
    AgentResult,
)
from repodigest.types.email import EmailReceipt
from repodigest.types.repos import MAX_COMMITS, Commit, Repository
from repodigest.types.state import ConnectionStatus, DashboardState

__all__ = [
    # Agent types
    "AgentResult",
    "AgentDirectory",
    "MANAGER_AGENT_ID",
    "GITHUB_DATA_AGENT_ID",
    "EMAIL_COMPOSER_AGENT_ID",
    # Repository types
    "Commit",
    "Repository",
    "MAX_COMMITS",
    # Email types
    "EmailReceipt",
    # State types
    "ConnectionStatus",
    "DashboardState",
]
