"""Tests for NotificationDispatcher: delivery outcomes never raise."""

import threading
from unittest.mock import MagicMock

import pytest
from donations.notification.channel import get_sender, reset_senders
from donations.notification.channel.fake_email import FakeEmailSender
from donations.notification.dispatcher import (
    DispatchResult,
    NotificationDispatcher,
    run_in_background,
    wait_for_dispatches,
)
from donations.shared.exceptions import DispatchFailure

REQUEST_DETAILS = {
    "donor_email": "donor@example.com",
    "donor_name": "Dana",
    "food_name": "Bread",
    "quantity": 3,
    "location": "Bakery",
    "requester_email": "hungry@example.com",
    "requested_at": "2026-10-17T09:30:00+00:00",
    "note": None,
}

ORDER_DETAILS = {
    "owner_email": "donor@example.com",
    "food_name": "Rice",
    "quantity": 40,
    "customer_email": "kitchen@example.com",
    "delivery_date": "2026-10-25",
    "delivery_address": "12 Main St",
}


class TestSuccessfulDispatch:
    def test_food_request_sent_to_donor(self):
        sender = FakeEmailSender()
        result = NotificationDispatcher(sender).notify_food_requested(REQUEST_DETAILS)

        assert result.success is True
        assert result.message_id.startswith("email-")
        assert sender.sent_emails[0]["to"] == "donor@example.com"
        assert sender.sent_emails[0]["subject"] == "New Food Request - Bread"

    def test_bulk_order_sent_to_owner(self):
        sender = FakeEmailSender()
        result = NotificationDispatcher(sender).notify_bulk_order(ORDER_DETAILS)

        assert result.success is True
        assert sender.sent_emails[0]["to"] == "donor@example.com"
        assert "Rice" in sender.sent_emails[0]["text_body"]

    def test_default_sender_comes_from_registry(self, sender):
        NotificationDispatcher().notify_food_requested(REQUEST_DETAILS)
        assert len(sender.sent_emails) == 1


class TestFailedDispatch:
    def test_failed_result_becomes_failure(self):
        sender = FakeEmailSender()
        sender.configure(should_succeed=False, failure_reason="Mailbox full")

        result = NotificationDispatcher(sender).notify_food_requested(REQUEST_DETAILS)

        assert result == DispatchResult(success=False, error="Mailbox full")

    def test_dispatch_failure_is_absorbed(self):
        sender = MagicMock()
        sender.send.side_effect = DispatchFailure("SMTP delivery failed")

        result = NotificationDispatcher(sender).notify_bulk_order(ORDER_DETAILS)

        assert result.success is False
        assert "SMTP delivery failed" in result.error

    def test_unexpected_exception_is_absorbed(self):
        sender = MagicMock()
        sender.send.side_effect = RuntimeError("boom")

        result = NotificationDispatcher(sender).notify_food_requested(REQUEST_DETAILS)

        assert result.success is False
        assert result.error == "boom"

    def test_missing_status_counts_as_failure(self):
        sender = MagicMock()
        sender.send.return_value = {}

        result = NotificationDispatcher(sender).notify_food_requested(REQUEST_DETAILS)

        assert result.success is False
        assert result.error == "Unknown dispatch error"


class TestSenderRegistry:
    def test_fake_is_default(self, monkeypatch):
        monkeypatch.delenv("NOTIFICATION_SENDER", raising=False)
        assert isinstance(get_sender(), FakeEmailSender)

    def test_singleton_until_reset(self):
        first = get_sender("fake")
        assert get_sender("fake") is first
        reset_senders()
        assert get_sender("fake") is not first

    def test_unknown_sender_kind(self):
        with pytest.raises(ValueError):
            get_sender("pigeon")


class TestBackgroundRunner:
    def test_returns_before_notify_finishes(self):
        release = threading.Event()
        finished = []

        def notify(details):
            release.wait(timeout=5)
            finished.append(details)

        future = run_in_background(notify, {"id": 1})

        assert not future.done()
        assert finished == []

        release.set()
        wait_for_dispatches(timeout=5)

        assert future.done()
        assert finished == [{"id": 1}]

    def test_result_is_available_on_future(self):
        sender = FakeEmailSender()
        future = run_in_background(NotificationDispatcher(sender).notify_food_requested, REQUEST_DETAILS)

        assert future.result(timeout=5).success is True
        assert sender.sent_emails[0]["to"] == "donor@example.com"

    def test_crash_in_background_is_contained(self):
        future = run_in_background(NotificationDispatcher(FakeEmailSender()).notify_food_requested, {})

        wait_for_dispatches(timeout=5)

        assert isinstance(future.exception(), KeyError)

    def test_inline_switch_runs_on_calling_thread(self, monkeypatch):
        monkeypatch.setenv("NOTIFICATION_DISPATCH", "inline")
        callers = []

        future = run_in_background(lambda details: callers.append(threading.current_thread()), {})

        assert future.done()
        assert callers == [threading.current_thread()]
