"""
RepoDigest SDK logging utilities.

Provides configurable logging for agent requests/responses and controller
operations. API keys and similar credentials never reach the log output.
"""

import logging
import re
from typing import Any

# Create SDK-specific loggers
_sdk_logger = logging.getLogger("repodigest")
_http_logger = logging.getLogger("repodigest.http")
_agent_logger = logging.getLogger("repodigest.agent")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Bearer tokens in header dumps
    (re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/]+=*", re.IGNORECASE), r"\1[REDACTED]"),
    # GitHub tokens
    (re.compile(r"\b(ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b"), "[GITHUB_TOKEN_REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"secret", "token", "password", "api_key", "apikey", "authorization"}

# Prompts can be long; keep log lines readable
_PROMPT_PREVIEW_LENGTH = 120


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    agent_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure RepoDigest SDK logging.

    Args:
        level: Default log level for all SDK loggers (default: INFO)
        http_level: Log level for agent request/response logging (default: same as level)
        agent_level: Log level for controller operations (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from repodigest.logging import configure_logging

        # Show the raw agent traffic
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _agent_logger.setLevel(agent_level if agent_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a RepoDigest SDK logger.

    Args:
        name: Logger name suffix (e.g., "http", "agent"). If None, returns main SDK logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"repodigest.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Args:
        text: Text that may contain tokens or credentials

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def preview_prompt(prompt: str) -> str:
    """Shorten a prompt for logging."""
    if len(prompt) <= _PROMPT_PREVIEW_LENGTH:
        return prompt
    return f"{prompt[:_PROMPT_PREVIEW_LENGTH]}..."


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: secret, token, password, api_key, authorization)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = str(key).lower().replace("-", "_")
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_agent_request(
    url: str,
    agent_id: str,
    prompt: str,
    headers: dict[str, str] | None = None,
) -> None:
    """
    Log an outgoing agent call at DEBUG level with sensitive data masked.

    Args:
        url: Request URL
        agent_id: Target agent ID
        prompt: Natural-language instruction sent to the agent
        headers: Request headers (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"POST {url}", f"agent_id={agent_id}", f"prompt={mask_sensitive_data(preview_prompt(prompt))!r}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    _http_logger.debug(" | ".join(log_parts))


def log_agent_response(
    status_code: int,
    url: str,
    body: dict[str, Any] | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an agent response at DEBUG level with sensitive data masked.

    Args:
        status_code: HTTP status code
        url: Request URL
        body: Response body (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if body:
        log_parts.append(f"body={safe_log_dict(body)}")

    _http_logger.debug(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "preview_prompt",
    "safe_log_dict",
    "log_agent_request",
    "log_agent_response",
]
