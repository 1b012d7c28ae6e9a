"""Fake email sender: records sent emails for testing."""

from uuid import uuid4

from donations.notification.channel.email_port import NotificationSender


class FakeEmailSender(NotificationSender):
    """Sender that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> dict:
        if not self.should_succeed:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        message_id = f"email-{uuid4().hex[:12]}"
        self.sent_emails.append(
            {
                "message_id": message_id,
                "to": to,
                "subject": subject,
                "html_body": html_body,
                "text_body": text_body,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
