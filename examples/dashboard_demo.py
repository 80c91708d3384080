#!/usr/bin/env python3
"""
RepoDigest dashboard walkthrough.

Runs the three dashboard actions and prints the resulting state.
Set REPODIGEST_BASE_URL to talk to a live agent service; without it the
script runs in sample mode and makes no network calls.

Run with: python examples/dashboard_demo.py [recipient@example.com]
"""

import asyncio
import logging
import os
import sys

from repodigest import (
    AgentInvocationController,
    AgentResult,
    AsyncAgentClient,
    configure_logging,
    repository_summary,
    truncate_message,
)


class OfflineInvoker:
    """Answers every call with a delivered-email receipt."""

    async def invoke(self, prompt: str, agent_id: str) -> AgentResult:
        return AgentResult.ok(
            {"result": {"status": "sent", "message": "Summary sent (offline demo)"}}
        )


def print_state(dashboard: AgentInvocationController) -> None:
    state = dashboard.state
    print(f"   Connection: {state.connection_status.value} {state.status_message}".rstrip())
    if state.error:
        print(f"   Error: {state.error}")
    for repo in dashboard.displayed_repositories:
        print(f"   - {repository_summary(repo)}")
        for commit in repo.commits:
            print(f"       {truncate_message(commit.message, 60)} ({commit.author})")
    if state.email_success:
        print(f"   Email: {state.email_success}")
    if state.email_error:
        print(f"   Email error: {state.email_error}")


async def run(dashboard: AgentInvocationController, recipient: str) -> None:
    print("1. Checking GitHub connection...")
    await dashboard.check_connection()
    print_state(dashboard)

    print("\n2. Fetching repositories...")
    await dashboard.fetch_repositories()
    print_state(dashboard)

    print(f"\n3. Sharing summary with {recipient}...")
    await dashboard.share_via_email(recipient)
    print_state(dashboard)


async def main() -> None:
    configure_logging(level=logging.WARNING)
    recipient = sys.argv[1] if len(sys.argv) > 1 else "colleague@example.com"

    print("=== RepoDigest Dashboard Example ===\n")

    if os.environ.get("REPODIGEST_BASE_URL"):
        async with AsyncAgentClient.from_env() as client:
            await run(client.dashboard(), recipient)
        return

    print("REPODIGEST_BASE_URL not set, using sample data\n")
    dashboard = AgentInvocationController(OfflineInvoker())
    dashboard.set_sample_mode(True)
    await run(dashboard, recipient)


if __name__ == "__main__":
    asyncio.run(main())
