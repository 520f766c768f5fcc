"""
Container lifecycle configuration.

Static tables driving stage derivation, deadline risk and the timeline.
These are fixed business rules, not per-tenant settings.
"""

from models.container_tracking import LifecycleStage

# =============================================================================
# LIFECYCLE STAGES
# =============================================================================
# Ordered first to last. Each stage is bound to the canonical date field that
# proves the container reached it.

LIFECYCLE_STAGES: tuple[LifecycleStage, ...] = tuple(
    LifecycleStage(index=i, key=key, label=label, field=field)
    for i, (key, label, field) in enumerate([
        ("EN_ROUTE", "En Route", "vessel_eta"),
        ("AT_PIER", "At Pier", "available_at_pier"),
        ("AT_FACILITY", "At Facility", "date_in"),
        ("STRIPPED", "Stripped", "strip_date"),
        ("AVAILABLE", "Available", "available_at_warehouse"),
        ("DISPATCHED", "Dispatched", "dispatched_date"),
        ("DELIVERED", "Delivered", "outgated_date"),
    ])
)

# Returned when no stage date is present
NO_STAGE = -1


# =============================================================================
# FREE-TIME DEADLINES
# =============================================================================
# (field, label). Order breaks ties between equally urgent deadlines.

DEADLINE_FIELDS: tuple[tuple[str, str], ...] = (
    ("pier_last_free_day", "Pier Last Free Day"),
    ("warehouse_free_time_expiry", "Warehouse Free Time Expiry"),
)

# Inclusive upper bounds on days remaining
CRITICAL_MAX_DAYS = 3
WARNING_MAX_DAYS = 7


# =============================================================================
# TIMELINE
# =============================================================================
# Every lifecycle and deadline date, in the order used to break ties.

TIMELINE_FIELDS: tuple[tuple[str, str], ...] = (
    ("vessel_eta", "Vessel ETA"),
    ("ata", "Vessel Arrived"),
    ("discharge_date", "Discharged"),
    ("available_at_pier", "Available at Pier"),
    ("pier_last_free_day", "Pier Last Free Day"),
    ("date_in", "Received at CFS"),
    ("strip_date", "Stripped"),
    ("available_at_warehouse", "Available at Warehouse"),
    ("warehouse_free_time_expiry", "Warehouse Free Time Expires"),
    ("appointment_date", "Pickup Appointment"),
    ("dispatched_date", "Dispatched"),
    ("outgated_date", "Outgated"),
    ("return_empty_date", "Empty Returned"),
)
