"""
RepoDigest SDK async client.

Bundles the agent transport with the agent directory and hands out
dashboard controllers bound to them.
"""

import os
from typing import Any

from repodigest.controller import AgentInvocationController
from repodigest.exceptions import ConfigurationError
from repodigest.transport import AsyncAgentTransport
from repodigest.types.agents import (
    EMAIL_COMPOSER_AGENT_ID,
    GITHUB_DATA_AGENT_ID,
    MANAGER_AGENT_ID,
    AgentDirectory,
    AgentResult,
)


class AsyncAgentClient:
    """
    Async client for the agent service.

    Example:
        ```python
        import asyncio
        from repodigest import AsyncAgentClient

        async def main():
            async with AsyncAgentClient.from_env() as client:
                dashboard = client.dashboard()
                await dashboard.check_connection()
                print(dashboard.state.status_message)

        asyncio.run(main())
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        agents: AgentDirectory | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the async client.

        Args:
            base_url: Base URL of the agent service
            api_key: Optional API key for the agent service
            agents: Agent IDs to route to (default: built-in directory)
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.base_url = base_url
        self.agents = agents or AgentDirectory()
        self.timeout = timeout

        self._transport = AsyncAgentTransport(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
        )

    @classmethod
    def from_env(cls) -> "AsyncAgentClient":
        """
        Create a client from environment variables.

        Environment variables:
            REPODIGEST_BASE_URL: Base URL of the agent service (required)
            REPODIGEST_API_KEY: API key (optional)
            REPODIGEST_TIMEOUT: Request timeout in seconds (optional, default: 30)
            REPODIGEST_MANAGER_AGENT_ID: Manager agent ID (optional)
            REPODIGEST_DATA_AGENT_ID: GitHub data agent ID (optional)
            REPODIGEST_EMAIL_AGENT_ID: Email composer agent ID (optional)

        Returns:
            Configured AsyncAgentClient instance

        Raises:
            ConfigurationError: If required variables are missing or malformed
        """
        base_url = os.environ.get("REPODIGEST_BASE_URL")
        api_key = os.environ.get("REPODIGEST_API_KEY") or None
        timeout_str = os.environ.get("REPODIGEST_TIMEOUT")

        if not base_url:
            raise ConfigurationError("REPODIGEST_BASE_URL environment variable not set")

        timeout = cls.DEFAULT_TIMEOUT
        if timeout_str:
            try:
                timeout = float(timeout_str)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid REPODIGEST_TIMEOUT: {timeout_str}. Must be a number of seconds"
                ) from None
            if timeout <= 0:
                raise ConfigurationError(
                    f"Invalid REPODIGEST_TIMEOUT: {timeout_str}. Must be positive"
                )

        agents = AgentDirectory(
            manager=os.environ.get("REPODIGEST_MANAGER_AGENT_ID") or MANAGER_AGENT_ID,
            github_data=os.environ.get("REPODIGEST_DATA_AGENT_ID") or GITHUB_DATA_AGENT_ID,
            email_composer=os.environ.get("REPODIGEST_EMAIL_AGENT_ID")
            or EMAIL_COMPOSER_AGENT_ID,
        )

        return cls(base_url=base_url, api_key=api_key, agents=agents, timeout=timeout)

    @property
    def transport(self) -> AsyncAgentTransport:
        """Get the underlying transport (for advanced use cases)."""
        return self._transport

    async def invoke(self, prompt: str, agent_id: str) -> AgentResult:
        """Run a prompt against an agent."""
        return await self._transport.invoke(prompt, agent_id)

    def dashboard(self) -> AgentInvocationController:
        """Create a dashboard controller bound to this client."""
        return AgentInvocationController(self, agents=self.agents)

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncAgentClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
