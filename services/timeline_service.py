"""
Container timeline.

Builds the chronological list of known milestones for one record.
"""

from datetime import datetime

from config.lifecycle import TIMELINE_FIELDS
from models.container_tracking import CanonicalContainerRecord, TimelineEvent
from utils.date_utils import to_naive_utc


def build_timeline(
    record: CanonicalContainerRecord,
    now: datetime
) -> list[TimelineEvent]:
    """
    Ordered milestones, earliest first.

    Absent dates are skipped. Events on the same instant keep the
    TIMELINE_FIELDS order (sorted() is stable).

    Args:
        record: Canonical record
        now: Reference time for is_past

    Returns:
        List of TimelineEvent ascending by instant
    """
    now = to_naive_utc(now)

    events = []
    for field, label in TIMELINE_FIELDS:
        instant = record.date_of(field)
        if instant is None:
            continue
        events.append(TimelineEvent(
            instant=instant,
            label=label,
            field=field,
            is_past=instant <= now,
        ))

    return sorted(events, key=lambda event: event.instant)
