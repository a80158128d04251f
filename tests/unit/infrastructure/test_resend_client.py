import pytest
import resend

from src.core.errors import NotifyError
from src.infrastructure.email.resend_client import ResendNotifier

@pytest.fixture
def sent(monkeypatch):
    messages = []

    def fake_send(params):
        messages.append(params)
        return {"id": "email_123"}

    monkeypatch.setattr(resend.Emails, "send", fake_send)
    return messages

def test_send_welcome_payload(sent):
    notifier = ResendNotifier(api_key="re_test", sender="Rhetix <hello@rhetix.app>")

    notifier.send_welcome("a@b.com")

    assert len(sent) == 1
    message = sent[0]
    assert message["from"] == "Rhetix <hello@rhetix.app>"
    assert message["to"] == ["a@b.com"]
    assert message["subject"] == "Welcome to Rhetix 👋"
    assert "Thanks for joining the Rhetix early access." in message["html"]
    assert "a@b.com" in message["html"]
    assert message["text"].startswith("Hey,")

def test_sender_override(sent):
    ResendNotifier(api_key="re_test", sender="Team <team@example.com>").send_welcome("a@b.com")
    assert sent[0]["from"] == "Team <team@example.com>"

def test_missing_api_key_does_not_call_provider(sent):
    with pytest.raises(NotifyError):
        ResendNotifier(api_key="").send_welcome("a@b.com")
    assert sent == []

def test_provider_error_becomes_notify_error(monkeypatch):
    def fail(params):
        raise RuntimeError("rate limited")

    monkeypatch.setattr(resend.Emails, "send", fail)

    with pytest.raises(NotifyError) as exc_info:
        ResendNotifier(api_key="re_test").send_welcome("a@b.com")
    assert isinstance(exc_info.value.__cause__, RuntimeError)

def test_recipient_is_escaped_in_html_only(sent):
    email = '<b>x"@y.co'

    ResendNotifier(api_key="re_test").send_welcome(email)

    message = sent[0]
    assert "<b>x" not in message["html"]
    assert "&lt;b&gt;x&quot;@y.co" in message["html"]
    assert message["to"] == [email]
    assert email in message["text"]
