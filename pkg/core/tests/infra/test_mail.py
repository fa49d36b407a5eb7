"""
Tests for the mail contract and in-memory transport.
"""

import pytest
from pydantic import ValidationError

from retrogrid.infra.mail import InMemoryMailSender, MailMessage


def test_message_accepts_wire_alias():
    message = MailMessage.model_validate(
        {"from": "a@tv.com", "to": "b@tv.com", "subject": "Hola", "content": "..."}
    )
    assert message.from_ == "a@tv.com"
    assert message.model_dump(by_alias=True)["from"] == "a@tv.com"


def test_message_is_immutable():
    message = MailMessage(from_="a@tv.com", to="b@tv.com", subject="s", content="c")
    with pytest.raises(ValidationError):
        message.to = "c@tv.com"


def test_outbox_keeps_order():
    sender = InMemoryMailSender()
    for to in ("x@tv.com", "y@tv.com", "x@tv.com"):
        sender.send_mail(MailMessage(from_="a@tv.com", to=to, subject="s", content="c"))
    assert [m.to for m in sender.outbox] == ["x@tv.com", "y@tv.com", "x@tv.com"]
    assert len(sender.sent_to("x@tv.com")) == 2
    sender.clear()
    assert sender.outbox == []
