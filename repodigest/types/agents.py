"""Agent invocation data models."""

from dataclasses import dataclass
from typing import Any

MANAGER_AGENT_ID = "698dad3c9bedf36d52f84667"
GITHUB_DATA_AGENT_ID = "698dad212dc7772e4cc0755e"
EMAIL_COMPOSER_AGENT_ID = "698dad2e75b236a82be3cfbc"


@dataclass
class AgentResult:
    """
    Outcome of a single agent call.

    Either ``success=True`` with an opaque ``response`` mapping, or
    ``success=False`` with an ``error`` string.
    """

    success: bool
    response: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def ok(cls, response: dict[str, Any] | None = None) -> "AgentResult":
        """Build a successful result."""
        return cls(success=True, response=response if response is not None else {})

    @classmethod
    def failure(cls, error: str | None) -> "AgentResult":
        """Build a failed result."""
        return cls(success=False, error=error)

    @property
    def result(self) -> Any:
        """The nested ``response.result`` value, or None."""
        if isinstance(self.response, dict):
            return self.response.get("result")
        return None


@dataclass(frozen=True)
class AgentDirectory:
    """Routing keys for the three agents the dashboard talks to."""

    manager: str = MANAGER_AGENT_ID
    github_data: str = GITHUB_DATA_AGENT_ID
    email_composer: str = EMAIL_COMPOSER_AGENT_ID

    def describe(self, agent_id: str) -> str:
        """Human-readable name for an agent ID."""
        names = {
            self.manager: "Manager Agent",
            self.github_data: "GitHub Data Agent",
            self.email_composer: "Email Composer Agent",
        }
        return names.get(agent_id, agent_id)
