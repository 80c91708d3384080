"""
Mock agent invoker for testing.

Provides a MockAgentInvoker that satisfies the AgentInvoker protocol
without making network calls.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from repodigest.types.agents import AgentResult


@dataclass
class MockResponse:
    """Configuration for a mock response."""

    data: AgentResult | None
    error: Exception | None = None
    call_count: int = 0


@dataclass
class MockCall:
    """Record of an invoke() call."""

    prompt: str
    agent_id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MockAgentInvoker:
    """
    Mock agent invoker for testing.

    Returns configurable results per agent ID and records every call.

    Example:
        ```python
        from repodigest import AgentInvocationController
        from repodigest.testing import MockAgentInvoker, repositories_result

        mock = MockAgentInvoker()
        controller = AgentInvocationController(mock)
        mock.configure(
            controller.agents.github_data,
            result=repositories_result([{"name": "demo"}]),
        )

        await controller.fetch_repositories()
        assert controller.state.repositories[0].name == "demo"
        assert mock.call_count(controller.agents.github_data) == 1
        ```
    """

    def __init__(
        self,
        default: AgentResult | None = None,
        on_invoke: Callable[[str, str], Any] | None = None,
    ) -> None:
        """
        Initialize the mock invoker.

        Args:
            default: Result for agents with no configured response
                (default: success with an empty payload)
            on_invoke: Callback run with (prompt, agent_id) when a call starts
        """
        self.default = default or AgentResult.ok({"result": {}})
        self.on_invoke = on_invoke
        self._calls: list[MockCall] = []
        self._responses: dict[str, MockResponse] = {}

    def configure(
        self,
        agent_id: str,
        result: AgentResult | None = None,
        error: Exception | None = None,
    ) -> None:
        """Configure the result (or raised error) for calls to ``agent_id``."""
        self._responses[agent_id] = MockResponse(data=result, error=error)

    async def invoke(self, prompt: str, agent_id: str) -> AgentResult:
        """Mock invoke method."""
        self._calls.append(MockCall(prompt=prompt, agent_id=agent_id))
        if self.on_invoke is not None:
            self.on_invoke(prompt, agent_id)
        return self._get_response(agent_id)

    def _get_response(self, agent_id: str) -> AgentResult:
        """Get configured response or default."""
        if agent_id in self._responses:
            resp = self._responses[agent_id]
            resp.call_count += 1
            if resp.error:
                raise resp.error
            if resp.data is not None:
                return resp.data
        return self.default

    def was_called(self, agent_id: str | None = None) -> bool:
        """
        Check if invoke() was called.

        Args:
            agent_id: Restrict the check to one agent

        Returns:
            True if a matching call was made
        """
        return self.call_count(agent_id) > 0

    def call_count(self, agent_id: str | None = None) -> int:
        """Number of invoke() calls, optionally for one agent."""
        return len(self.get_calls(agent_id))

    def get_calls(self, agent_id: str | None = None) -> list[MockCall]:
        """
        Get recorded calls, optionally filtered by agent.

        Returns:
            List of MockCall objects in call order
        """
        if agent_id is None:
            return list(self._calls)
        return [call for call in self._calls if call.agent_id == agent_id]

    def reset(self) -> None:
        """Reset all recorded calls and configured responses."""
        self._calls.clear()
        self._responses.clear()

    async def close(self) -> None:
        """No-op for compatibility with the real transport."""
        pass


__all__ = [
    "MockAgentInvoker",
    "MockCall",
    "MockResponse",
]
