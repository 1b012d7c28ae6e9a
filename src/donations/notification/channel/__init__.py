"""Sender registry: singleton access to the configured email sender.

``NOTIFICATION_SENDER`` selects the implementation: ``fake`` (default)
keeps messages in memory, ``smtp`` delivers through the relay described
by the ``EMAIL_*`` variables.
"""

import os

_sender_instances: dict[str, object] = {}


def get_sender(kind: str | None = None):
    """Return the configured sender (singleton per kind)."""
    kind = (kind or os.getenv("NOTIFICATION_SENDER", "fake")).lower()

    if kind not in _sender_instances:
        if kind == "fake":
            from donations.notification.channel.fake_email import FakeEmailSender

            _sender_instances[kind] = FakeEmailSender()
        elif kind == "smtp":
            from donations.notification.channel.smtp_email import SMTPEmailSender

            _sender_instances[kind] = SMTPEmailSender()
        else:
            raise ValueError(f"Unknown notification sender: {kind}")

    return _sender_instances[kind]


def reset_senders():
    """Reset all sender singletons (useful for testing)."""
    _sender_instances.clear()
