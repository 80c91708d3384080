"""Dashboard view-state."""

from dataclasses import dataclass, field
from enum import Enum

from repodigest.types.repos import Repository


class ConnectionStatus(str, Enum):
    """GitHub connection state as last observed by a connection check."""

    UNKNOWN = "unknown"
    CHECKING = "checking"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


@dataclass
class DashboardState:
    """In-memory state reconciled from agent results."""

    repositories: list[Repository] = field(default_factory=list)
    loading: bool = False
    error: str | None = None

    email_loading: bool = False
    email_error: str | None = None
    email_success: str | None = None
    recipient_email: str = ""

    use_sample_data: bool = False

    connection_status: ConnectionStatus = ConnectionStatus.UNKNOWN
    status_message: str = ""

    # operation name -> agent ID, in start order
    in_flight: dict[str, str] = field(default_factory=dict)

    @property
    def active_agent(self) -> str | None:
        """The most recently started agent that is still running."""
        if not self.in_flight:
            return None
        return list(self.in_flight.values())[-1]
