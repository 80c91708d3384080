"""Repository and commit data models."""

from dataclasses import dataclass, field

# Number of recent commits kept per repository
MAX_COMMITS = 5

DEFAULT_REPOSITORY_NAME = "Unnamed Repository"
DEFAULT_DESCRIPTION = "No description available"
DEFAULT_COMMIT_MESSAGE = "No message"
DEFAULT_AUTHOR = "Unknown"


@dataclass
class Commit:
    """A single commit as reported by the data agent."""

    message: str = DEFAULT_COMMIT_MESSAGE
    author: str = DEFAULT_AUTHOR
    timestamp: str = ""  # ISO 8601, empty when unknown


@dataclass
class Repository:
    """A GitHub repository with its most recent commits."""

    name: str = DEFAULT_REPOSITORY_NAME
    description: str = DEFAULT_DESCRIPTION
    language: str | None = None
    stars: int = 0
    last_updated: str | None = None  # ISO 8601
    commits: list[Commit] = field(default_factory=list)
