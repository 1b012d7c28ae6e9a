"""Notification dispatcher: renders donor emails and hands them to a sender.

Dispatch is best effort. Whatever the sender does (a failed result, a
``DispatchFailure``, any other exception) ends up as an unsuccessful
``DispatchResult`` and an error log entry, never as an exception.

Event handlers never call the dispatcher inline: ``run_in_background``
queues the send on a small thread pool and returns at once, so a slow
mail relay cannot hold up the command that raised the event.
``NOTIFICATION_DISPATCH=inline`` runs the send on the calling thread
instead.
"""

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass

import structlog

from donations.notification.channel import get_sender
from donations.notification.templates import get_template
from donations.notification.types import NotificationType

logger = structlog.get_logger(__name__)

_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="notify")
_pending: set[Future] = set()
_pending_lock = threading.Lock()


@dataclass(frozen=True)
class DispatchResult:
    success: bool
    message_id: str | None = None
    error: str | None = None


class NotificationDispatcher:
    def __init__(self, sender=None):
        self._sender = sender

    @property
    def sender(self):
        return self._sender or get_sender()

    def notify_food_requested(self, details: dict) -> DispatchResult:
        """Tell the donor that their listing was requested."""
        return self._dispatch(NotificationType.FOOD_REQUESTED, details["donor_email"], details)

    def notify_bulk_order(self, details: dict) -> DispatchResult:
        """Tell the listing owner about a new bulk order."""
        return self._dispatch(NotificationType.BULK_ORDER_PLACED, details["owner_email"], details)

    def _dispatch(self, notification_type: NotificationType, recipient: str, context: dict) -> DispatchResult:
        try:
            content = get_template(notification_type.value).render(context)
            result = self.sender.send(
                to=recipient,
                subject=content["subject"],
                html_body=content["html"],
                text_body=content["text"],
            )
        except Exception as exc:
            logger.error(
                "Notification dispatch failed",
                notification_type=notification_type.value,
                recipient=recipient,
                error=str(exc),
            )
            return DispatchResult(success=False, error=str(exc))

        if result.get("status") != "sent":
            error = result.get("error") or "Unknown dispatch error"
            logger.error(
                "Notification dispatch failed",
                notification_type=notification_type.value,
                recipient=recipient,
                error=error,
            )
            return DispatchResult(success=False, error=error)

        logger.info(
            "Notification sent",
            notification_type=notification_type.value,
            recipient=recipient,
            message_id=result.get("message_id"),
        )
        return DispatchResult(success=True, message_id=result.get("message_id"))


def get_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher()


def _inline() -> bool:
    return os.getenv("NOTIFICATION_DISPATCH", "background").lower() == "inline"


def _finished(future: Future) -> None:
    with _pending_lock:
        _pending.discard(future)

    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.error("Background notification crashed", error=str(exc))


def run_in_background(notify, details: dict) -> Future:
    """Queue ``notify(details)`` and return without waiting for it."""
    if _inline():
        future = Future()
        try:
            future.set_result(notify(details))
        except Exception as exc:
            future.set_exception(exc)
        _finished(future)
        return future

    future = _executor.submit(notify, details)
    with _pending_lock:
        _pending.add(future)
    future.add_done_callback(_finished)
    return future


def wait_for_dispatches(timeout: float | None = None) -> None:
    """Block until every queued notification has finished."""
    with _pending_lock:
        outstanding = set(_pending)
    if outstanding:
        wait(outstanding, timeout=timeout)
