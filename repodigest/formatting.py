"""Text helpers for presenting repositories and commits."""

from datetime import datetime, timezone

from repodigest.types.repos import DEFAULT_COMMIT_MESSAGE, Repository


def _parse_timestamp(value: str) -> datetime:
    # fromisoformat() only accepts a trailing Z from 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def format_relative_time(timestamp: str | None, now: datetime | None = None) -> str:
    """
    Format an ISO 8601 timestamp as a short relative label.

    Args:
        timestamp: ISO 8601 timestamp (a trailing "Z" is accepted)
        now: Reference time (default: current UTC time)

    Returns:
        "3d ago", "5h ago", "12m ago", "Just now", "Unknown" for empty input,
        or the input unchanged if it cannot be parsed
    """
    if not timestamp:
        return "Unknown"

    try:
        moment = _parse_timestamp(timestamp)
    except ValueError:
        return timestamp

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = (now - moment).total_seconds()
    days = int(seconds // 86400)
    hours = int(seconds // 3600)
    minutes = int(seconds // 60)

    if days > 0:
        return f"{days}d ago"
    if hours > 0:
        return f"{hours}h ago"
    if minutes > 0:
        return f"{minutes}m ago"
    return "Just now"


def truncate_message(message: str | None, max_length: int = 80) -> str:
    """Shorten a commit message to ``max_length`` characters plus an ellipsis."""
    if not message:
        return DEFAULT_COMMIT_MESSAGE
    if len(message) <= max_length:
        return message
    return message[:max_length] + "..."


def repository_summary(repo: Repository, now: datetime | None = None) -> str:
    """One-line description of a repository."""
    parts = [repo.name, f"★ {repo.stars}"]
    if repo.language:
        parts.append(repo.language)
    if repo.last_updated:
        parts.append(f"updated {format_relative_time(repo.last_updated, now)}")
    parts.append(f"{len(repo.commits)} recent commits")
    return " | ".join(parts)
