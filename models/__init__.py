"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema, FrozenSchema
from models.container_tracking import (
    RecordSource,
    SearchBy,
    DeadlineSeverity,
    CanonicalContainerRecord,
    LifecycleStage,
    TimelineEvent,
    DeadlineRisk,
    DeadlineRiskSummary,
    ContainerTrackingView,
)

__all__ = [
    # Base
    "BaseSchema",
    "FrozenSchema",

    # Container tracking
    "RecordSource",
    "SearchBy",
    "DeadlineSeverity",
    "CanonicalContainerRecord",
    "LifecycleStage",
    "TimelineEvent",
    "DeadlineRisk",
    "DeadlineRiskSummary",
    "ContainerTrackingView",
]
