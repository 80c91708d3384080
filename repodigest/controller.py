"""
Agent invocation controller.

Drives the dashboard's three actions against an agent invoker and
reconciles each result into ``DashboardState``. Operations never raise:
every outcome ends as a message in one of the state's message slots.
"""

from repodigest.classify import (
    ConnectionFailure,
    classify_connection_error,
    is_delivery_confirmed,
)
from repodigest.exceptions import SchemaError
from repodigest.logging import get_logger
from repodigest.parsing import parse_email_receipt, parse_repository_listing
from repodigest.samples import sample_repositories
from repodigest.transport import AgentInvoker
from repodigest.types.agents import AgentDirectory
from repodigest.types.email import EmailReceipt
from repodigest.types.repos import Repository
from repodigest.types.state import ConnectionStatus, DashboardState

logger = get_logger("agent")

CHECK_CONNECTION_PROMPT = (
    "Check if my GitHub account is connected and return the connection status"
)
FETCH_REPOSITORIES_PROMPT = "Fetch my GitHub repositories with their commit history"
SHARE_EMAIL_PROMPT = (
    "Send an email to {recipient} with a summary of my GitHub repositories "
    "and recent commits"
)

MSG_CONNECTED = "GitHub account is connected and ready"
MSG_NOT_CONNECTED = "GitHub account is not connected. Please connect your account."
MSG_CONNECTION_UNVERIFIED = "Unable to verify connection status"
MSG_CONNECTION_CHECK_ERROR = "Error checking connection status"

MSG_NO_REPOSITORIES = (
    "No repositories found. Please ensure your GitHub account is connected."
)
MSG_FETCH_FAILED = "Failed to fetch repositories"
MSG_UNEXPECTED = "An unexpected error occurred"

MSG_RECIPIENT_REQUIRED = "Please enter a recipient email address"
MSG_RECIPIENT_INVALID = "Please enter a valid email address"
MSG_FETCH_FIRST = "Please fetch repositories first before sharing"
MSG_EMAIL_FAILED = "Failed to send email"
MSG_EMAIL_SENT = "Email successfully sent to {recipient}"

OP_CHECK_CONNECTION = "check_connection"
OP_FETCH_REPOSITORIES = "fetch_repositories"
OP_SHARE_EMAIL = "share_via_email"


def is_plausible_email(address: str) -> bool:
    """Loose syntactic check: the address contains both "@" and "."."""
    return "@" in address and "." in address


class AgentInvocationController:
    """
    Controller for the repository digest dashboard.

    Each operation follows the same pattern: set its loading flag, mark its
    agent in flight, await exactly one ``invoke`` call, then write the
    outcome into ``state``. The in-flight entry is removed however the call
    ends.

    The email action sends only a prompt. The manager agent is expected to
    hold the repository context itself, which is why sharing requires a
    prior fetch outside sample mode.

    Example:
        ```python
        from repodigest import AgentInvocationController, AsyncAgentTransport

        async with AsyncAgentTransport("http://localhost:3000") as transport:
            controller = AgentInvocationController(transport)
            await controller.fetch_repositories()
            for repo in controller.state.repositories:
                print(repo.name, repo.stars)
        ```
    """

    def __init__(
        self,
        invoker: AgentInvoker,
        agents: AgentDirectory | None = None,
        state: DashboardState | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            invoker: Object providing ``async invoke(prompt, agent_id)``
            agents: Agent IDs to route to (default: the built-in directory)
            state: Initial state (default: empty state)
        """
        self.invoker = invoker
        self.agents = agents or AgentDirectory()
        self.state = state or DashboardState()
        self._samples = sample_repositories()

    # ------------------------------------------------------------------
    # Derived view properties
    # ------------------------------------------------------------------

    @property
    def sample_repositories(self) -> list[Repository]:
        """The fixed sample list this controller serves in sample mode."""
        return list(self._samples)

    @property
    def displayed_repositories(self) -> list[Repository]:
        """Repositories the view should show."""
        if self.state.use_sample_data:
            return self.sample_repositories
        return self.state.repositories

    @property
    def can_check(self) -> bool:
        return self.state.connection_status is not ConnectionStatus.CHECKING

    @property
    def can_fetch(self) -> bool:
        return not self.state.loading and not self.state.use_sample_data

    @property
    def can_share(self) -> bool:
        return not self.state.email_loading and (
            self.state.use_sample_data or bool(self.displayed_repositories)
        )

    def is_agent_active(self, agent_id: str) -> bool:
        return agent_id in self.state.in_flight.values()

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------

    def set_sample_mode(self, enabled: bool) -> None:
        """Switch sample mode. Turning it on drops fetched data and errors."""
        if enabled and not self.state.use_sample_data:
            self.state.repositories = []
            self.state.error = None
        self.state.use_sample_data = enabled

    def set_recipient(self, value: str) -> None:
        """Update the recipient input, clearing the previous email outcome."""
        self.state.recipient_email = value
        self.state.email_error = None
        self.state.email_success = None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def check_connection(self) -> None:
        """Ask the data agent whether the GitHub account is connected."""
        state = self.state
        state.connection_status = ConnectionStatus.CHECKING
        state.status_message = ""
        self._begin(OP_CHECK_CONNECTION, self.agents.github_data)

        try:
            result = await self.invoker.invoke(
                CHECK_CONNECTION_PROMPT, self.agents.github_data
            )

            if result.success:
                state.connection_status = ConnectionStatus.CONNECTED
                state.status_message = MSG_CONNECTED
                logger.info("GitHub connection confirmed")
            else:
                error = result.error or ""
                state.connection_status = ConnectionStatus.DISCONNECTED
                if classify_connection_error(error) is ConnectionFailure.NOT_CONNECTED:
                    state.status_message = MSG_NOT_CONNECTED
                else:
                    state.status_message = error or MSG_CONNECTION_UNVERIFIED
                logger.warning("Connection check failed: %s", error or "<no error text>")
        except Exception:
            logger.exception("Connection check raised")
            state.connection_status = ConnectionStatus.DISCONNECTED
            state.status_message = MSG_CONNECTION_CHECK_ERROR
        finally:
            self._end(OP_CHECK_CONNECTION)

    async def fetch_repositories(self) -> None:
        """Load repositories, from the data agent or the sample fixture."""
        state = self.state
        if state.use_sample_data:
            state.repositories = self.sample_repositories
            return

        state.loading = True
        state.error = None
        self._begin(OP_FETCH_REPOSITORIES, self.agents.github_data)

        try:
            result = await self.invoker.invoke(
                FETCH_REPOSITORIES_PROMPT, self.agents.github_data
            )

            if result.success:
                try:
                    repos = parse_repository_listing(result.result)
                except SchemaError as e:
                    logger.warning("Unusable repository payload: %s", e.message)
                    repos = []

                state.repositories = repos
                logger.info("Fetched %d repositories", len(repos))
                if not repos:
                    state.error = MSG_NO_REPOSITORIES
            else:
                logger.warning("Repository fetch failed: %s", result.error)
                state.error = result.error or MSG_FETCH_FAILED
        except Exception as e:
            logger.exception("Repository fetch raised")
            state.error = str(e) or MSG_UNEXPECTED
        finally:
            state.loading = False
            self._end(OP_FETCH_REPOSITORIES)

    async def share_via_email(self, recipient: str | None = None) -> None:
        """
        Ask the manager agent to email a repository summary.

        Args:
            recipient: Address to send to (default: current ``recipient_email``)
        """
        state = self.state
        if recipient is not None:
            state.recipient_email = recipient
        address = state.recipient_email

        if not address:
            state.email_error = MSG_RECIPIENT_REQUIRED
            return
        if not is_plausible_email(address):
            state.email_error = MSG_RECIPIENT_INVALID
            return
        if not state.repositories and not state.use_sample_data:
            state.email_error = MSG_FETCH_FIRST
            return

        state.email_loading = True
        state.email_error = None
        state.email_success = None
        self._begin(OP_SHARE_EMAIL, self.agents.manager)

        try:
            result = await self.invoker.invoke(
                SHARE_EMAIL_PROMPT.format(recipient=address), self.agents.manager
            )

            if result.success:
                try:
                    receipt = parse_email_receipt(result.result)
                except SchemaError as e:
                    logger.warning("Unusable email receipt: %s", e.message)
                    receipt = EmailReceipt()

                if is_delivery_confirmed(receipt.status):
                    state.email_success = receipt.message or MSG_EMAIL_SENT.format(
                        recipient=address
                    )
                    state.recipient_email = ""
                    logger.info("Summary email sent")
                else:
                    state.email_error = receipt.message or MSG_EMAIL_FAILED
                    logger.warning("Email not delivered, status=%r", receipt.status)
            else:
                logger.warning("Email request failed: %s", result.error)
                state.email_error = result.error or MSG_EMAIL_FAILED
        except Exception:
            logger.exception("Email request raised")
            state.email_error = MSG_UNEXPECTED
        finally:
            state.email_loading = False
            self._end(OP_SHARE_EMAIL)

    # ------------------------------------------------------------------
    # In-flight bookkeeping
    # ------------------------------------------------------------------

    def _begin(self, operation: str, agent_id: str) -> None:
        # re-insert so the newest start is last
        self.state.in_flight.pop(operation, None)
        self.state.in_flight[operation] = agent_id
        logger.debug("%s started on %s", operation, self.agents.describe(agent_id))

    def _end(self, operation: str) -> None:
        self.state.in_flight.pop(operation, None)
        logger.debug("%s finished", operation)
