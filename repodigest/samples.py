"""Built-in sample data used when the dashboard runs in sample mode."""

from datetime import datetime, timedelta, timezone

from repodigest.types.repos import Commit, Repository


def _iso(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def sample_repositories(now: datetime | None = None) -> list[Repository]:
    """
    Build the sample repository list.

    Timestamps are relative to ``now`` (default: current UTC time), so the
    relative-time labels stay meaningful.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    def ago(**delta: float) -> str:
        return _iso(now - timedelta(**delta))

    return [
        Repository(
            name="awesome-nextjs-app",
            description="A modern Next.js application with TypeScript, Tailwind CSS, and AI integration",
            language="TypeScript",
            stars=142,
            last_updated=ago(days=2),
            commits=[
                Commit("feat: Add GitHub integration with OAuth support", "johndoe", ago(hours=1)),
                Commit("fix: Resolve email sending issue in production", "johndoe", ago(hours=4)),
                Commit("docs: Update README with deployment instructions", "janedoe", ago(hours=8)),
            ],
        ),
        Repository(
            name="react-dashboard",
            description="Interactive analytics dashboard built with React and D3.js",
            language="JavaScript",
            stars=89,
            last_updated=ago(days=5),
            commits=[
                Commit("refactor: Improve chart rendering performance", "alexsmith", ago(days=2)),
                Commit("feat: Add real-time data streaming support", "alexsmith", ago(days=3)),
            ],
        ),
        Repository(
            name="python-ml-toolkit",
            description="Machine learning utilities and pre-trained models for common tasks",
            language="Python",
            stars=256,
            last_updated=ago(days=1),
            commits=[
                Commit("feat: Add sentiment analysis model", "mlexpert", ago(hours=12)),
                Commit("test: Add comprehensive unit tests for NLP module", "mlexpert", ago(hours=20)),
                Commit("chore: Update dependencies to latest versions", "dependabot", ago(days=1)),
            ],
        ),
        Repository(
            name="api-gateway",
            description="Scalable microservices gateway with rate limiting and authentication",
            language="Go",
            stars=321,
            last_updated=ago(days=3),
            commits=[
                Commit("perf: Optimize request routing algorithm", "backend-dev", ago(days=2)),
                Commit("security: Implement JWT token validation", "backend-dev", ago(days=3)),
            ],
        ),
        Repository(
            name="mobile-chat-app",
            description="Cross-platform messaging app with end-to-end encryption",
            language="Dart",
            stars=178,
            last_updated=ago(days=7),
            commits=[
                Commit("feat: Add voice message support", "mobile-team", ago(days=5)),
                Commit("fix: Resolve notification delivery on iOS", "mobile-team", ago(days=6)),
            ],
        ),
    ]
