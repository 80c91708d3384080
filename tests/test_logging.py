"""
Property-based tests for RepoDigest SDK logging.

Feature: repodigest-dashboard
"""

import io
import logging

from hypothesis import given, settings
from hypothesis import strategies as st

from repodigest.logging import (
    configure_logging,
    get_logger,
    log_agent_request,
    log_agent_response,
    mask_sensitive_data,
    preview_prompt,
    safe_log_dict,
)

secret_strategy = st.text(
    alphabet=st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"),
    min_size=24,
    max_size=64,
)


def _capture(logger_name: str) -> tuple[io.StringIO, logging.Handler]:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(logger_name)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return stream, handler


@given(secret=secret_strategy)
@settings(max_examples=100)
def test_property_api_key_never_logged(secret: str) -> None:
    """
    For any API key value, safe_log_dict SHALL replace it.
    """
    headers = {"x-api-key": secret, "Content-Type": "application/json"}

    masked = safe_log_dict(headers)

    assert masked["x-api-key"] == "[REDACTED]"
    assert masked["Content-Type"] == "application/json"
    assert secret not in str(masked)


@given(secret=secret_strategy)
@settings(max_examples=100)
def test_property_nested_tokens_masked(secret: str) -> None:
    data = {"response": {"result": {"token": secret, "items": [{"password": secret}]}}}

    masked = safe_log_dict(data)

    assert secret not in str(masked)


@given(secret=secret_strategy)
@settings(max_examples=100)
def test_property_bearer_tokens_masked_in_text(secret: str) -> None:
    masked = mask_sensitive_data(f"Authorization: Bearer {secret}")

    assert secret not in masked
    assert "[REDACTED]" in masked


def test_github_token_masked() -> None:
    token = "ghp_" + "a1" * 18

    assert token not in mask_sensitive_data(f"use {token} to clone")


def test_preview_prompt() -> None:
    assert preview_prompt("short") == "short"
    assert preview_prompt("x" * 200) == "x" * 120 + "..."


def test_get_logger_names() -> None:
    assert get_logger().name == "repodigest"
    assert get_logger("http").name == "repodigest.http"
    assert get_logger("agent").name == "repodigest.agent"


def test_configure_logging_levels() -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    try:
        configure_logging(level=logging.WARNING, http_level=logging.DEBUG, handler=handler)

        assert get_logger().level == logging.WARNING
        assert get_logger("http").level == logging.DEBUG
        assert get_logger("agent").level == logging.WARNING
    finally:
        get_logger().removeHandler(handler)


def test_agent_request_logged_without_key() -> None:
    stream, handler = _capture("repodigest.http")
    try:
        log_agent_request(
            "http://agents.local/api/agent",
            "agent-1",
            "Fetch my GitHub repositories",
            {"x-api-key": "super-secret-value"},
        )
    finally:
        logging.getLogger("repodigest.http").removeHandler(handler)

    output = stream.getvalue()
    assert "agent_id=agent-1" in output
    assert "Fetch my GitHub repositories" in output
    assert "super-secret-value" not in output


def test_agent_response_logged_with_timing() -> None:
    stream, handler = _capture("repodigest.http")
    try:
        log_agent_response(200, "http://agents.local/api/agent", {"success": True}, 12.345)
    finally:
        logging.getLogger("repodigest.http").removeHandler(handler)

    output = stream.getvalue()
    assert "Response 200" in output
    assert "elapsed=12.35ms" in output


def test_nothing_logged_above_debug() -> None:
    stream, handler = _capture("repodigest.http")
    logging.getLogger("repodigest.http").setLevel(logging.INFO)
    try:
        log_agent_request("http://agents.local/api/agent", "agent-1", "prompt")
    finally:
        logging.getLogger("repodigest.http").removeHandler(handler)

    assert stream.getvalue() == ""
