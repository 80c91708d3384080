"""
Async HTTP transport for the agent service.

Binds the ``invoke(prompt, agent_id)`` primitive to a single JSON endpoint
using httpx. There is no retry: one call, one result.
"""

import time
from typing import Any, Protocol

import httpx

from repodigest.exceptions import AgentTransportError
from repodigest.logging import log_agent_request, log_agent_response
from repodigest.types.agents import AgentResult


class AgentInvoker(Protocol):
    """Anything that can run a prompt against an agent."""

    async def invoke(self, prompt: str, agent_id: str) -> AgentResult:
        ...


class AsyncAgentTransport:
    """
    Async transport that posts prompts to the agent service.

    Handles:
    - Request construction and optional API key header
    - Mapping error statuses to failed AgentResults
    - Wrapping network errors in AgentTransportError
    """

    DEFAULT_PATH = "/api/agent"

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 30.0,
        path: str = DEFAULT_PATH,
    ) -> None:
        """
        Initialize async agent transport.

        Args:
            base_url: Base URL of the agent service (e.g., "http://localhost:3000")
            api_key: Optional key sent as the ``x-api-key`` header
            timeout: Request timeout in seconds
            path: Invocation endpoint path
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.path = path

        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["x-api-key"] = api_key

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncAgentTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def invoke(self, prompt: str, agent_id: str) -> AgentResult:
        """
        Run a prompt against an agent.

        Args:
            prompt: Natural-language instruction
            agent_id: Target agent ID

        Returns:
            AgentResult; error statuses from the service come back as
            ``success=False`` rather than raising

        Raises:
            AgentTransportError: On network errors or a non-JSON success body
        """
        url = f"{self.base_url}{self.path}"
        log_agent_request(url, agent_id, prompt, dict(self._client.headers))

        started = time.monotonic()
        try:
            response = await self._client.request(
                "POST",
                self.path,
                json={"message": prompt, "agent_id": agent_id},
            )
        except httpx.RequestError as e:
            raise AgentTransportError("CONNECTION_ERROR", str(e) or type(e).__name__) from e
        elapsed_ms = (time.monotonic() - started) * 1000

        try:
            data = response.json()
        except ValueError:
            data = None

        log_agent_response(
            response.status_code,
            url,
            data if isinstance(data, dict) else None,
            elapsed_ms,
        )

        if response.status_code >= 400:
            return AgentResult.failure(
                self._error_message(data) or f"HTTP {response.status_code}"
            )

        if not isinstance(data, dict):
            raise AgentTransportError(
                "INVALID_RESPONSE",
                "Agent service returned a non-JSON body",
                response.status_code,
            )

        return self._parse_result(data)

    def _parse_result(self, data: dict[str, Any]) -> AgentResult:
        """
        Parse a response body into an AgentResult.

        Args:
            data: Decoded JSON body

        Returns:
            AgentResult mirroring the body's ``success`` flag
        """
        if data.get("success") is True:
            response = data.get("response")
            return AgentResult.ok(response if isinstance(response, dict) else {})
        return AgentResult.failure(self._error_message(data))

    def _error_message(self, data: Any) -> str | None:
        """Pull an error message out of a body (string or ``{message}``)."""
        if not isinstance(data, dict):
            return None

        error = data.get("error")
        if isinstance(error, dict):
            error = error.get("message")
        if isinstance(error, str) and error:
            return error
        return None
