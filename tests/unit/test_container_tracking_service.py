"""
Unit tests for ContainerTrackingService.

Run: pytest tests/unit/test_container_tracking_service.py -v
"""

import threading
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from models.container_tracking import DeadlineSeverity, RecordSource, SearchBy
from services.container_tracking_service import (
    ContainerTrackingService,
    build_tracking_view,
    get_container_tracking_service,
)
from services.reconciliation_service import ReconciliationService
import services.container_tracking_service as tracking_service_module
from tests.factories import ContainerRecordFactory


@pytest.fixture(autouse=True)
def reset_singleton():
    """Reset the singleton service between tests."""
    tracking_service_module._container_tracking_service = None
    yield
    tracking_service_module._container_tracking_service = None


@pytest.fixture
def reconciler():
    """Reconciler stub that finds nothing."""
    stub = MagicMock()
    stub.resolve.return_value = None
    return stub


# ===================
# VIEW TESTS
# ===================

class TestBuildTrackingView:
    """Tests for build_tracking_view()"""

    def test_combines_all_derivations(self, now):
        """Stage, progress, risk and timeline all come from one record."""
        record = ContainerRecordFactory.with_lifecycle(
            pier_last_free_day=now + timedelta(days=2),
            warehouse_free_time_expiry=now + timedelta(days=9),
        )
        view = build_tracking_view(record, now)

        assert view.record is record
        assert view.current_stage_index == 3
        assert view.current_stage.key == "STRIPPED"
        assert view.progress_percent == 57
        assert view.deadline_risk.field == "pier_last_free_day"
        assert view.deadline_risk.severity == DeadlineSeverity.CRITICAL
        assert [d.field for d in view.deadlines] == ["pier_last_free_day", "warehouse_free_time_expiry"]
        assert len(view.timeline) == 6

    def test_empty_record(self, now):
        """A bare record has no stage, no risk and an empty timeline."""
        view = build_tracking_view(ContainerRecordFactory.create(), now)

        assert view.current_stage_index == -1
        assert view.current_stage is None
        assert view.progress_percent == 0
        assert view.deadline_risk is None
        assert view.deadlines == []
        assert view.timeline == []


# ===================
# TRACK TESTS
# ===================

class TestTrack:
    """Tests for ContainerTrackingService.track()"""

    def test_not_found_returns_none(self, reconciler):
        """A miss from the reconciler is passed through."""
        service = ContainerTrackingService(reconciler=reconciler)
        assert service.track("NOPE0000000") is None

    def test_returns_view_for_resolved_record(self, reconciler, now):
        """A resolved record is turned into a view."""
        reconciler.resolve.return_value = ContainerRecordFactory.with_lifecycle()
        service = ContainerTrackingService(reconciler=reconciler)

        view = service.track("FFAU2413670", now=now)

        assert view.current_stage_index == 3
        assert all(event.is_past for event in view.timeline)

    def test_forwards_lookup_arguments(self, reconciler):
        """Search type, budget and cancel event reach the reconciler."""
        cancel = threading.Event()
        service = ContainerTrackingService(reconciler=reconciler)

        service.track("HBL-001", SearchBy.HOUSE_BILL, timeout_seconds=4, cancel_event=cancel)

        args, kwargs = reconciler.resolve.call_args
        assert args == ("HBL-001", SearchBy.HOUSE_BILL)
        assert kwargs == {"timeout_seconds": 4, "cancel_event": cancel}

    def test_default_budget_from_settings(self, reconciler):
        """Without a budget the configured one is used."""
        service = ContainerTrackingService(reconciler=reconciler)
        service.track("FFAU2413670")

        assert reconciler.resolve.call_args.kwargs["timeout_seconds"] == tracking_service_module.settings.tracking_timeout_seconds

    def test_explicit_zero_budget_is_kept(self, reconciler):
        """A zero budget is not replaced by the configured default."""
        service = ContainerTrackingService(reconciler=reconciler)
        service.track("FFAU2413670", timeout_seconds=0)

        assert reconciler.resolve.call_args.kwargs["timeout_seconds"] == 0

    def test_end_to_end_with_live_payload(self, live_client, internal_client, sample_live_payload):
        """A live payload flows through reconciliation into a view."""
        live_client.fetch.return_value = sample_live_payload
        reconciler = ReconciliationService(live_client=live_client, internal_client=internal_client)
        service = ContainerTrackingService(reconciler=reconciler)

        view = service.track("FFAU2413670", now=datetime(2024, 3, 7, 9, 0))

        assert view.record.source == RecordSource.LIVE_API
        assert view.record.container_number == "FFAU2413670"
        assert view.current_stage.key == "AVAILABLE"
        assert view.deadline_risk.field == "pier_last_free_day"
        assert view.deadline_risk.days_remaining == 1
        assert view.deadline_risk.severity == DeadlineSeverity.CRITICAL
        assert "strip_date" not in [e.field for e in view.timeline]


class TestContainerTrackingServiceInstance:
    """Tests for service instance creation."""

    def test_get_service_returns_singleton(self):
        """Should return the same instance on multiple calls."""
        service1 = get_container_tracking_service()
        service2 = get_container_tracking_service()
        assert isinstance(service1, ContainerTrackingService)
        assert service1 is service2
