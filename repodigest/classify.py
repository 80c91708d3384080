"""Free-text classifiers for agent errors and delivery status."""

from enum import Enum

NOT_CONNECTED_KEYWORDS = ("not connected", "authentication", "oauth")
DELIVERED_KEYWORDS = ("success", "sent")


class ConnectionFailure(str, Enum):
    """Why a connection check failed."""

    NOT_CONNECTED = "not_connected"
    OTHER = "other"


def classify_connection_error(error: str | None) -> ConnectionFailure:
    """
    Classify a failed connection check by its error text.

    Matching is a case-insensitive substring test against
    ``NOT_CONNECTED_KEYWORDS``.
    """
    text = (error or "").lower()
    if any(keyword in text for keyword in NOT_CONNECTED_KEYWORDS):
        return ConnectionFailure.NOT_CONNECTED
    return ConnectionFailure.OTHER


def is_delivery_confirmed(status: str | None) -> bool:
    """True if an email status string reports a delivered message."""
    text = (status or "").lower()
    return any(keyword in text for keyword in DELIVERED_KEYWORDS)
