"""RepoDigest SDK exception classes."""


class RepoDigestError(Exception):
    """Base exception for all RepoDigest SDK errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(RepoDigestError):
    """Raised when SDK configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class SchemaError(RepoDigestError):
    """Raised when an agent payload does not have the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__("SCHEMA_ERROR", message)


class AgentTransportError(RepoDigestError):
    """Raised when the agent service cannot be reached or answers garbage."""

    def __init__(
        self, code: str, message: str, status_code: int | None = None
    ) -> None:
        super().__init__(code, message)
        self.status_code = status_code
