"""Tests for the notification payload and run models."""

import json

import pytest
from pydantic import ValidationError

from order_filter.models import DispatchReport, NotificationPayload, RunStatus, RunSummary


def test_notification_payload_defaults_resource_type():
    payload = NotificationPayload(resource_url="https://ssapi.shipstation.com/orders?page=1")
    assert payload.resource_type == "OrderFilterTimerTrigger"


def test_notification_payload_wire_format():
    """The handler expects exactly resource_url and resource_type."""
    payload = NotificationPayload(resource_url="https://ssapi.shipstation.com/orders?page=2")

    assert json.loads(payload.model_dump_json()) == {
        "resource_url": "https://ssapi.shipstation.com/orders?page=2",
        "resource_type": "OrderFilterTimerTrigger",
    }


def test_notification_payload_is_immutable():
    payload = NotificationPayload(resource_url="https://ssapi.shipstation.com/orders?page=3")

    with pytest.raises(ValidationError):
        payload.resource_url = "https://elsewhere.example.com"


def test_notification_payload_requires_url():
    with pytest.raises(ValidationError):
        NotificationPayload()


def test_dispatch_report_succeeded():
    report = DispatchReport(submitted=4, completed=4, failed=1, failed_pages=[3])
    assert report.succeeded == 3


def test_run_summary_serializes_status_value():
    summary = RunSummary(status=RunStatus.ABORTED, error="bad metadata")
    assert summary.model_dump(mode="json")["status"] == "aborted"
