"""
Business logic services.

Each service handles one step of container tracking.
"""

from services.lifecycle_service import current_stage, stage_for, progress_percent
from services.deadline_risk_service import (
    classify_days_remaining,
    evaluate_deadline_risk,
    evaluate_all_deadlines,
    summarize_deadline_risks,
)
from services.timeline_service import build_timeline
from services.reconciliation_service import ReconciliationService, get_reconciliation_service
from services.container_tracking_service import (
    ContainerTrackingService,
    get_container_tracking_service,
    build_tracking_view,
)

__all__ = [
    "current_stage",
    "stage_for",
    "progress_percent",
    "classify_days_remaining",
    "evaluate_deadline_risk",
    "evaluate_all_deadlines",
    "summarize_deadline_risks",
    "build_timeline",
    "ReconciliationService",
    "get_reconciliation_service",
    "ContainerTrackingService",
    "get_container_tracking_service",
    "build_tracking_view",
]
