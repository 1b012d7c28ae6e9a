"""SMTP email sender: delivers mail through the configured relay.

Configuration comes from the environment:

    EMAIL_HOST, EMAIL_PORT (587), EMAIL_USER, EMAIL_PASS, EMAIL_FROM,
    EMAIL_TIMEOUT (seconds, 10)

The connection is upgraded with STARTTLS whenever the server offers it.
"""

import os
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

import structlog

from donations.notification.channel.email_port import NotificationSender
from donations.shared.exceptions import DispatchFailure

logger = structlog.get_logger(__name__)

SENDER_NAME = "Food Sharing Platform"


class SMTPEmailSender(NotificationSender):
    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        username: str | None = None,
        password: str | None = None,
        from_address: str | None = None,
        timeout: float | None = None,
    ):
        self.host = host or os.getenv("EMAIL_HOST", "localhost")
        self.port = int(port or os.getenv("EMAIL_PORT", "587"))
        self.username = username or os.getenv("EMAIL_USER")
        self.password = password or os.getenv("EMAIL_PASS")
        self.from_address = from_address or os.getenv("EMAIL_FROM") or self.username or ""
        self.timeout = float(timeout or os.getenv("EMAIL_TIMEOUT", "10"))

    def build_message(self, to: str, subject: str, html_body: str, text_body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((SENDER_NAME, self.from_address))
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid(domain=self.from_address.partition("@")[2] or None)
        message.set_content(text_body)
        message.add_alternative(html_body, subtype="html")
        return message

    def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> dict:
        message = self.build_message(to, subject, html_body, text_body)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls()
                    smtp.ehlo()
                if self.username and self.password:
                    smtp.login(self.username, self.password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise DispatchFailure(f"SMTP delivery to {to} failed: {exc}", recipient=to) from exc

        logger.debug("SMTP message accepted", recipient=to, host=self.host)
        return {"message_id": message["Message-ID"], "status": "sent"}
