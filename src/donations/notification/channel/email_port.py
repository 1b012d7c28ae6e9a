"""Email sender port: abstract interface for delivering rendered mail."""

from abc import ABC, abstractmethod


class NotificationSender(ABC):
    """Abstract interface for email senders."""

    @abstractmethod
    def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> dict:
        """Send an email message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
