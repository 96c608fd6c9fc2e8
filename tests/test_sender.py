import pytest

from notifyflow.channel import Channel
from notifyflow.history import Entry, get_all_history
from notifyflow.producer import Notification
from notifyflow.sender import send_email, send_push, send_sms, send_webhook

SENDERS = [
    (send_email, "Email", "email", ""),
    (send_sms, "SMS", "sms", "\n"),
    (send_webhook, "Webhook", "webhook", "\n"),
    (send_push, "Push", "sender", "\n"),
]


def _feed(*notifications):
    ch = Channel()
    for n in notifications:
        ch.send(n)
    ch.close()
    return ch


@pytest.mark.parametrize("sender,label,stage,suffix", SENDERS)
def test_sends_and_records(sender, label, stage, suffix):
    n = Notification(42, label, "hello there")
    errors, history = Channel(), Channel()
    out = sender(_feed(n), errors, history, delay=0)

    results = list(out)
    assert results == [f"[{label} Sent] ID: 42, Message: hello there{suffix}"]
    assert history.receive(timeout=1) == Entry(
        f"{label} Sender", n, f"{label} sent successfully"
    )
    assert get_all_history()[-1] == Entry(stage=stage, notification=n)
    with pytest.raises(TimeoutError):
        errors.receive(timeout=0.05)


@pytest.mark.parametrize("sender,label,stage,suffix", SENDERS)
def test_empty_message_reports_error(sender, label, stage, suffix):
    n = Notification(7, label, "")
    errors, history = Channel(), Channel()
    before = len(get_all_history())
    out = sender(_feed(n), errors, history, delay=0)

    assert list(out) == []
    err = errors.receive(timeout=1)
    assert str(err) == f"[Sender Error] {label} message is empty. ID: 7"
    with pytest.raises(TimeoutError):
        history.receive(timeout=0.05)
    assert len(get_all_history()) == before


def test_multiple_preserve_order_and_skip_empty():
    items = [
        Notification(1, "Email", "first"),
        Notification(2, "Email", ""),
        Notification(3, "Email", "third"),
    ]
    errors, history = Channel(), Channel()
    out = send_email(_feed(*items), errors, history, delay=0)
    results = list(out)
    assert [r.split(",")[0] for r in results] == [
        "[Email Sent] ID: 1",
        "[Email Sent] ID: 3",
    ]
    assert [history.receive(timeout=1).notification.id for _ in results] == [1, 3]
    assert "ID: 2" in str(errors.receive(timeout=1))


def test_output_closed_after_input_exhausted():
    out = send_sms(_feed(), Channel(), Channel(), delay=0)
    assert list(out) == []
    with pytest.raises(Exception) as info:
        out.receive(timeout=1)
    assert type(info.value).__name__ == "ChannelClosed"


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        send_push(_feed(), Channel(), Channel(), delay=-1)