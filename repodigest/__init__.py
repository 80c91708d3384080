"""RepoDigest SDK - agent-driven GitHub repository digests."""

from repodigest.classify import (
    ConnectionFailure,
    classify_connection_error,
    is_delivery_confirmed,
)
from repodigest.client import AsyncAgentClient
from repodigest.controller import AgentInvocationController
from repodigest.exceptions import (
    AgentTransportError,
    ConfigurationError,
    RepoDigestError,
    SchemaError,
)
from repodigest.formatting import format_relative_time, repository_summary, truncate_message
from repodigest.logging import configure_logging, get_logger
from repodigest.parsing import (
    parse_commit,
    parse_email_receipt,
    parse_repository,
    parse_repository_listing,
)
from repodigest.samples import sample_repositories
from repodigest.transport import AgentInvoker, AsyncAgentTransport
from repodigest.types import (
    AgentDirectory,
    AgentResult,
    Commit,
    ConnectionStatus,
    DashboardState,
    EmailReceipt,
    Repository,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client and controller
    "AsyncAgentClient",
    "AgentInvocationController",
    # Transport
    "AgentInvoker",
    "AsyncAgentTransport",
    # Types
    "AgentDirectory",
    "AgentResult",
    "Commit",
    "Repository",
    "EmailReceipt",
    "ConnectionStatus",
    "DashboardState",
    # Parsing
    "parse_commit",
    "parse_repository",
    "parse_repository_listing",
    "parse_email_receipt",
    # Classification
    "ConnectionFailure",
    "classify_connection_error",
    "is_delivery_confirmed",
    # Samples and formatting
    "sample_repositories",
    "format_relative_time",
    "truncate_message",
    "repository_summary",
    # Exceptions
    "RepoDigestError",
    "ConfigurationError",
    "SchemaError",
    "AgentTransportError",
    # Logging
    "configure_logging",
    "get_logger",
]
