"""Service interfaces (ports) for the application layer.

Protocols define contracts for external services (DIP).
"""

from __future__ import annotations

from typing import Protocol


# Mail transport interface
class IMailTransport(Protocol):
    """Protocol for delivering one plain-text message to one address."""

    async def send(self, to: str, subject: str, body: str) -> None:
        """Deliver the message. Raises MailDeliveryError when delivery fails."""
