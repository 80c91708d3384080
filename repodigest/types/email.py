"""Email delivery data models."""

from dataclasses import dataclass


@dataclass
class EmailReceipt:
    """Delivery report returned by the manager agent."""

    status: str = ""  # free text, e.g. "sent", "Success", "pending"
    recipient: str = ""
    message: str = ""
