"""
Container Tracking Service - the combined view handed to the UI/API layer.

Resolves the record once, then runs stage derivation, deadline risk and the
timeline independently over it. Nothing is cached or persisted; every call
re-derives from the provider data.
"""

import threading
from datetime import datetime
from typing import Optional, Union

import structlog

from config import settings
from models.container_tracking import (
    CanonicalContainerRecord,
    ContainerTrackingView,
    SearchBy,
)
from services.deadline_risk_service import evaluate_all_deadlines
from services.lifecycle_service import current_stage, progress_percent, stage_for
from services.reconciliation_service import (
    ReconciliationService,
    get_reconciliation_service,
)
from services.timeline_service import build_timeline
from utils.date_utils import utc_now

logger = structlog.get_logger(__name__)


def build_tracking_view(
    record: CanonicalContainerRecord,
    now: datetime
) -> ContainerTrackingView:
    """
    Derive stage, deadline risk and timeline for one record.

    Args:
        record: Canonical record
        now: Reference time

    Returns:
        ContainerTrackingView
    """
    stage_index = current_stage(record)
    deadlines = evaluate_all_deadlines(record, now)

    return ContainerTrackingView(
        record=record,
        current_stage_index=stage_index,
        current_stage=stage_for(record),
        progress_percent=progress_percent(stage_index),
        deadline_risk=deadlines[0] if deadlines else None,
        deadlines=deadlines,
        timeline=build_timeline(record, now),
    )


class ContainerTrackingService:
    """Looks up a container and returns every derived fact about it."""

    def __init__(self, reconciler: Optional[ReconciliationService] = None):
        self.reconciler = reconciler or get_reconciliation_service()

    def track(
        self,
        key: Optional[str],
        search_by: Union[SearchBy, str] = SearchBy.CONTAINER,
        now: Optional[datetime] = None,
        timeout_seconds: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Optional[ContainerTrackingView]:
        """
        Track a container by container number or house bill.

        Args:
            key: Lookup key
            search_by: SearchBy.CONTAINER or SearchBy.HOUSE_BILL
            now: Reference time (defaults to current UTC time)
            timeout_seconds: Lookup budget (defaults to settings)
            cancel_event: Set by the caller to abandon the lookup

        Returns:
            ContainerTrackingView, or None if the container was not found

        Raises:
            InvalidSearchTypeError: If search_by is not a known search type
        """
        if timeout_seconds is None:
            timeout_seconds = settings.tracking_timeout_seconds

        record = self.reconciler.resolve(
            key,
            search_by,
            timeout_seconds=timeout_seconds,
            cancel_event=cancel_event
        )
        if record is None:
            return None

        view = build_tracking_view(record, now or utc_now())

        logger.info(
            "container_tracked",
            container_number=record.container_number,
            source=record.source.value,
            stage_index=view.current_stage_index,
            severity=view.deadline_risk.severity.value if view.deadline_risk else None,
            timeline_events=len(view.timeline)
        )

        return view


# Singleton instance
_container_tracking_service: Optional[ContainerTrackingService] = None


def get_container_tracking_service() -> ContainerTrackingService:
    """Get the singleton container tracking service instance."""
    global _container_tracking_service
    if _container_tracking_service is None:
        _container_tracking_service = ContainerTrackingService()
    return _container_tracking_service
