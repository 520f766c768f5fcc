"""
Live tracking API adapter.

Maps the camelCase payload returned by the live tracking API into a
CanonicalContainerRecord. The payload may be wrapped in a response envelope:

    {"response": {"result": <str | list | dict>, "status": 200}}

where result can be a JSON-encoded string, a list (first element wins) or a
bare object. Anything else produces a record with no container number, which
the reconciler rejects.
"""

import json
from typing import Any, Optional

import structlog

from models.container_tracking import CanonicalContainerRecord, RecordSource
from utils.date_utils import parse_date
from utils.text_utils import clean_text, first_present, normalize_reference

logger = structlog.get_logger(__name__)


# Canonical field -> aliases, most preferred first
IDENTITY_ALIASES: dict[str, tuple[str, ...]] = {
    "container_number": ("containerNumber", "containerNo", "container"),
    "master_bill_number": ("masterBillNumber", "masterBill", "mblNumber"),
    "job_number": ("jobNumber", "jobLotNo", "jobNo"),
    "stg_reference": ("stgReference", "stgRef", "reference"),
    "customer_reference": ("customerReference", "customerRef", "customerCode"),
}

TEXT_ALIASES: dict[str, tuple[str, ...]] = {
    "status": ("status", "containerStatus", "statusDescription"),
    "location": ("location", "cfsLocation", "currentLocation"),
    "vessel_name": ("vesselName", "vessel"),
}

DATE_ALIASES: dict[str, tuple[str, ...]] = {
    "vessel_eta": ("vesselETA", "vesselEta", "eta"),
    "ata": ("ata", "actualArrival", "vesselATA"),
    "available_at_pier": ("availableAtPier", "pierAvailableDate"),
    "date_in": ("dateIn", "cfsDateIn", "receivedDate"),
    "strip_date": ("stripDate", "strippedDate", "devanDate"),
    "available_at_warehouse": ("availableAtWarehouse", "availableAtStg", "availableDate"),
    "appointment_date": ("appointmentDate", "appointment", "pickupAppointment"),
    "dispatched_date": ("dispatchedDate", "dispatchDate"),
    "outgated_date": ("outgatedDate", "outgateDate", "outGateDate"),
    "return_empty_date": ("returnEmptyDate", "emptyReturnDate"),
    "discharge_date": ("dischargeDate", "dischargedDate"),
    "pier_last_free_day": ("pierLFD", "pierLastFreeDay", "lastFreeDay"),
    "warehouse_free_time_expiry": ("warehouseFreeTimeExpiry", "warehouseLFD", "freeTimeExpiry"),
}


def parse_live_api_record(payload: Any) -> CanonicalContainerRecord:
    """
    Normalize a live API payload.

    Args:
        payload: Decoded JSON body as returned by the live tracking client

    Returns:
        CanonicalContainerRecord tagged with RecordSource.LIVE_API. Invalid
        (no container number) when the payload has an unexpected shape.
    """
    record = unwrap_payload(payload)
    if record is None:
        logger.debug("live_api_payload_unusable", payload_type=type(payload).__name__)
        return CanonicalContainerRecord(source=RecordSource.LIVE_API)

    values: dict[str, Any] = {}

    for field, aliases in IDENTITY_ALIASES.items():
        values[field] = normalize_reference(first_present(record, aliases))

    for field, aliases in TEXT_ALIASES.items():
        values[field] = clean_text(first_present(record, aliases))

    for field, aliases in DATE_ALIASES.items():
        values[field] = parse_date(first_present(record, aliases))

    values["container_number"] = values["container_number"] or ""

    return CanonicalContainerRecord(source=RecordSource.LIVE_API, **values)


def unwrap_payload(payload: Any) -> Optional[dict]:
    """
    Strip the response envelope and return the container object.

    Returns:
        The inner record dict, or None if the payload holds no object
    """
    if isinstance(payload, dict) and isinstance(payload.get("response"), dict):
        payload = payload["response"].get("result")

    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except (ValueError, RecursionError):
            return None

    if isinstance(payload, list):
        payload = payload[0] if payload else None

    if isinstance(payload, dict):
        return payload

    return None
