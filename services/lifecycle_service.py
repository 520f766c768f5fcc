"""
Lifecycle stage derivation.

The current stage is recomputed from the record's dates on every read and is
never stored. The scan walks every stage and keeps the last one whose date is
present, so a missing intermediate date (a strip date nobody recorded, say)
never pulls the stage backwards.
"""

from typing import Optional

from config.lifecycle import LIFECYCLE_STAGES, NO_STAGE
from models.container_tracking import CanonicalContainerRecord, LifecycleStage


def current_stage(record: CanonicalContainerRecord) -> int:
    """
    Index of the furthest stage reached.

    Returns:
        Index into LIFECYCLE_STAGES, or -1 when no stage date is present.
        -1 means "no data", not "en route".
    """
    reached = NO_STAGE
    for stage in LIFECYCLE_STAGES:
        if record.date_of(stage.field) is not None:
            reached = stage.index
    return reached


def stage_for(record: CanonicalContainerRecord) -> Optional[LifecycleStage]:
    """Furthest stage reached, or None when nothing is known."""
    index = current_stage(record)
    if index == NO_STAGE:
        return None
    return LIFECYCLE_STAGES[index]


def progress_percent(stage_index: int) -> int:
    """
    Share of the lifecycle completed, for progress bars.

    (index + 1) / stage count, rounded; 0 when no stage is reached.
    """
    if stage_index < 0:
        return 0
    return round((stage_index + 1) / len(LIFECYCLE_STAGES) * 100)
