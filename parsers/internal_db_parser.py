"""
Internal database adapter.

Maps a container row from the internal database into a
CanonicalContainerRecord. Column names have drifted across schema versions,
so each logical field lists its historical aliases, newest first.
"""

from typing import Any

from models.container_tracking import CanonicalContainerRecord, RecordSource
from utils.date_utils import parse_date
from utils.text_utils import clean_text, first_present, normalize_reference


IDENTITY_ALIASES: dict[str, tuple[str, ...]] = {
    "container_number": ("container_number", "container_no", "cntr_number"),
    "master_bill_number": ("mbl_number", "master_bill_number", "master_bl"),
    "job_number": ("job_number", "job_lot_no", "job_no"),
    "stg_reference": ("stg_reference", "stg_ref"),
    "customer_reference": ("customer_reference", "customer_ref", "customer_code"),
}

TEXT_ALIASES: dict[str, tuple[str, ...]] = {
    "status": ("status", "lifecycle_stage"),
    "location": ("location", "cfs_location", "cfs_code"),
    "vessel_name": ("vessel_name", "vessel"),
}

DATE_ALIASES: dict[str, tuple[str, ...]] = {
    "vessel_eta": ("vessel_eta", "eta"),
    "ata": ("ata", "actual_arrival"),
    "available_at_pier": ("available_at_pier", "pier_available_date"),
    "date_in": ("date_in", "cfs_date_in", "received_date"),
    "strip_date": ("stripped_date", "strip_date"),
    "available_at_warehouse": ("available_at_stg", "available_at_warehouse", "available_date"),
    "appointment_date": ("appointment_date", "pickup_appointment"),
    "dispatched_date": ("dispatched_date", "dispatch_date", "pickup_date"),
    "outgated_date": ("outgated_date", "outgate_date", "out_gate_date", "delivery_date"),
    "return_empty_date": ("return_empty_date", "empty_return_date"),
    "discharge_date": ("discharge_date", "discharged_date"),
    "pier_last_free_day": ("pier_lfd", "pier_last_free_day"),
    "warehouse_free_time_expiry": ("warehouse_lfd", "warehouse_free_time_expiry"),
}


def parse_internal_db_record(row: Any) -> CanonicalContainerRecord:
    """
    Normalize an internal database row.

    Args:
        row: Row dict as returned by the database client

    Returns:
        CanonicalContainerRecord tagged with RecordSource.INTERNAL_DB.
        Invalid (no container number) when row is not a dict.
    """
    if not isinstance(row, dict):
        return CanonicalContainerRecord(source=RecordSource.INTERNAL_DB)

    values: dict[str, Any] = {}

    for field, aliases in IDENTITY_ALIASES.items():
        values[field] = normalize_reference(first_present(row, aliases))

    for field, aliases in TEXT_ALIASES.items():
        values[field] = clean_text(first_present(row, aliases))

    for field, aliases in DATE_ALIASES.items():
        values[field] = parse_date(first_present(row, aliases))

    values["container_number"] = values["container_number"] or ""

    return CanonicalContainerRecord(source=RecordSource.INTERNAL_DB, **values)
