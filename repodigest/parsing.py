"""
Conversion of untyped agent payloads into typed models.

Agent responses carry no schema. Everything the controller reads from
``response.result`` goes through this module, so the rest of the code can
trust the types it gets back.
"""

from collections.abc import Mapping
from typing import Any

from repodigest.exceptions import SchemaError
from repodigest.types.email import EmailReceipt
from repodigest.types.repos import (
    DEFAULT_AUTHOR,
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_DESCRIPTION,
    DEFAULT_REPOSITORY_NAME,
    MAX_COMMITS,
    Commit,
    Repository,
)


def _get(data: Mapping[str, Any], camel: str, snake: str, default: Any = None) -> Any:
    """Get value from dict, trying camelCase first then snake_case."""
    return data.get(camel) if camel in data else data.get(snake, default)


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _optional_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else 0
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def parse_commit(data: Any) -> Commit:
    """Build a Commit from any value, substituting defaults for missing fields."""
    if not isinstance(data, Mapping):
        return Commit()
    return Commit(
        message=_text(data.get("message"), DEFAULT_COMMIT_MESSAGE),
        author=_text(data.get("author"), DEFAULT_AUTHOR),
        timestamp=_text(data.get("timestamp"), ""),
    )


def parse_repository(data: Any) -> Repository:
    """Build a Repository from any value, substituting defaults for missing fields."""
    if not isinstance(data, Mapping):
        return Repository()

    commits = data.get("commits")
    if not isinstance(commits, list):
        commits = []

    return Repository(
        name=_text(data.get("name"), DEFAULT_REPOSITORY_NAME),
        description=_text(data.get("description"), DEFAULT_DESCRIPTION),
        language=_optional_text(data.get("language")),
        stars=_count(_get(data, "stars", "stargazers_count", 0)),
        last_updated=_optional_text(_get(data, "lastUpdated", "last_updated")),
        commits=[parse_commit(commit) for commit in commits[:MAX_COMMITS]],
    )


def parse_repository_listing(result: Any) -> list[Repository]:
    """
    Extract the repository list from a data-agent result.

    Args:
        result: The ``response.result`` value of a successful agent call

    Returns:
        Parsed repositories, in payload order (possibly empty)

    Raises:
        SchemaError: If the payload is not a mapping or ``repositories`` is
            missing or not a list
    """
    if not isinstance(result, Mapping):
        raise SchemaError(f"expected an object, got {type(result).__name__}")

    repositories = result.get("repositories")
    if repositories is None:
        raise SchemaError("payload has no 'repositories' field")
    if not isinstance(repositories, list):
        raise SchemaError(
            f"'repositories' must be a list, got {type(repositories).__name__}"
        )

    return [parse_repository(repo) for repo in repositories]


def parse_email_receipt(result: Any) -> EmailReceipt:
    """
    Extract the delivery report from a manager-agent result.

    Raises:
        SchemaError: If the payload is not a mapping
    """
    if not isinstance(result, Mapping):
        raise SchemaError(f"expected an object, got {type(result).__name__}")

    return EmailReceipt(
        status=_text(result.get("status"), ""),
        recipient=_text(result.get("recipient"), ""),
        message=_text(result.get("message"), ""),
    )


__all__ = [
    "parse_commit",
    "parse_repository",
    "parse_repository_listing",
    "parse_email_receipt",
]
