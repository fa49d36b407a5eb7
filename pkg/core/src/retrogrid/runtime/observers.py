"""
Creation observers.

Observers react to a freshly created program. They return nothing and keep
no state beyond their collaborators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.entities import Program
from ..infra.logging import get_logger
from ..infra.mail import MailMessage, MailSender
from ..infra.settings import settings

if TYPE_CHECKING:
    from ..core.revision.process import RevisionProcess
    from ..domain.grid import Grid

logger = get_logger(__name__)

OPPORTUNITY_SUBJECT = "Oportunidad!"
SPONSOR_SUBJECT = "Urgente: conseguir sponsors"


class CreationObserver(Protocol):
    def notify(self, program: Program, grid: Grid) -> None: ...


class NotifyPresenters:
    """Mails every presenter of a new program about the opportunity."""

    def __init__(self, mail_sender: MailSender, sender: str | None = None) -> None:
        self.mail_sender = mail_sender
        self.sender = sender or settings.mail_sender

    def notify(self, program: Program, grid: Grid) -> None:
        for address in program.presenter_mails():
            self.mail_sender.send_mail(
                MailMessage(
                    from_=self.sender,
                    to=address,
                    subject=OPPORTUNITY_SUBJECT,
                    content=f"Fuiste seleccionado para conducir {program.title}! Ponete en contacto con la gerencia.",
                )
            )


class EscalateSponsorSearch:
    """Asks management for sponsors when a new program's budget is above the threshold."""

    def __init__(
        self,
        mail_sender: MailSender,
        threshold: int | None = None,
        address: str | None = None,
        sender: str | None = None,
    ) -> None:
        self.mail_sender = mail_sender
        self.threshold = threshold if threshold is not None else settings.sponsor_escalation_threshold
        self.address = address or settings.sponsor_escalation_address
        self.sender = sender or settings.mail_sender

    def notify(self, program: Program, grid: Grid) -> None:
        if program.budget <= self.threshold:
            return
        logger.info("sponsor.escalated", title=program.title, budget=program.budget)
        self.mail_sender.send_mail(
            MailMessage(
                from_=self.sender,
                to=self.address,
                subject=SPONSOR_SUBJECT,
                content=(
                    f"Necesitamos sponsors urgentes para {program.title}, "
                    f"su presupuesto es de ${program.budget}."
                ),
            )
        )


class TrackCreatedPrograms:
    """Puts every newly created program under revision."""

    def __init__(self, process: RevisionProcess) -> None:
        self.process = process

    def notify(self, program: Program, grid: Grid) -> None:
        self.process.track(program)
