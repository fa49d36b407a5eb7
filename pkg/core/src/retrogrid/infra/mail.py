"""
Mail transport contract consumed by creation observers.

The engine only ever calls MailSender.send_mail(); delivery, confirmation
and retry belong to the concrete transport.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from .logging import get_logger

logger = get_logger(__name__)


class MailMessage(BaseModel):
    """A single outgoing mail."""

    from_: str = Field(..., alias="from", description="Sender address")
    to: str = Field(..., description="Recipient address")
    subject: str
    content: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MailSender(Protocol):
    """Anything able to hand a MailMessage to a transport."""

    def send_mail(self, message: MailMessage) -> None: ...


class InMemoryMailSender:
    """
    Transport that keeps every message in an outbox list.

    Used by simulations and tests in place of a real mail service.
    """

    def __init__(self) -> None:
        self.outbox: list[MailMessage] = []

    def send_mail(self, message: MailMessage) -> None:
        self.outbox.append(message)
        logger.debug("mail.sent", to=message.to, subject=message.subject)

    def sent_to(self, address: str) -> list[MailMessage]:
        """Messages addressed to a given recipient, in send order."""
        return [m for m in self.outbox if m.to == address]

    def clear(self) -> None:
        self.outbox.clear()
