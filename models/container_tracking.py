"""
Container tracking schemas.

The canonical record is the single shape every provider adapter produces and
every derivation (stage, deadline risk, timeline) reads. Dates are either a
naive UTC datetime or None; None always means "not yet happened".
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from models.base import BaseSchema, FrozenSchema


class RecordSource(str, Enum):
    """Which provider satisfied the lookup."""

    LIVE_API = "liveApi"
    INTERNAL_DB = "internalDb"


class SearchBy(str, Enum):
    """Kind of lookup key."""

    CONTAINER = "container"
    HOUSE_BILL = "houseBill"


class DeadlineSeverity(str, Enum):
    """Severity band for the most urgent free-time deadline."""

    OVERDUE = "OVERDUE"    # Free time already expired
    CRITICAL = "CRITICAL"  # 0-3 days left
    WARNING = "WARNING"    # 4-7 days left
    OK = "OK"              # More than a week left


# ===================
# CANONICAL RECORD
# ===================

class CanonicalContainerRecord(FrozenSchema):
    """
    Unified view of one container, regardless of provider.

    A record without a container number is structurally invalid and is
    rejected by the reconciler.
    """

    # Identity
    container_number: str = Field("", description="Container number (reconciliation key)")
    master_bill_number: Optional[str] = Field(None, description="Master bill of lading")
    job_number: Optional[str] = Field(None, description="Warehouse job / lot number")
    stg_reference: Optional[str] = Field(None, description="CFS operator reference")
    customer_reference: Optional[str] = Field(None, description="Customer reference")

    # Status
    status: Optional[str] = Field(None, description="Provider status label")
    location: Optional[str] = Field(None, description="Current location / CFS")
    vessel_name: Optional[str] = Field(None, description="Vessel name")

    # Lifecycle dates
    vessel_eta: Optional[datetime] = None
    ata: Optional[datetime] = None
    available_at_pier: Optional[datetime] = None
    date_in: Optional[datetime] = None
    strip_date: Optional[datetime] = None
    available_at_warehouse: Optional[datetime] = None
    appointment_date: Optional[datetime] = None
    dispatched_date: Optional[datetime] = None
    outgated_date: Optional[datetime] = None
    return_empty_date: Optional[datetime] = None
    discharge_date: Optional[datetime] = None

    # Deadline dates
    pier_last_free_day: Optional[datetime] = None
    warehouse_free_time_expiry: Optional[datetime] = None

    # Provenance
    source: RecordSource = Field(..., description="Provider that produced this record")

    @property
    def is_valid(self) -> bool:
        """True if the record carries a container number."""
        return bool(self.container_number)

    def date_of(self, field_name: str) -> Optional[datetime]:
        """Return the date stored under a canonical field name."""
        return getattr(self, field_name)


# ===================
# DERIVED VIEWS
# ===================

class LifecycleStage(FrozenSchema):
    """One milestone of the fixed lifecycle, bound to a canonical date field."""

    index: int = Field(..., ge=0)
    key: str
    label: str
    field: str


class TimelineEvent(FrozenSchema):
    """A dated milestone on the container timeline."""

    instant: datetime
    label: str
    field: str
    is_past: bool


class DeadlineRisk(FrozenSchema):
    """Days remaining on a free-time deadline and its severity band."""

    field: str
    label: str
    date: datetime
    days_remaining: int
    severity: DeadlineSeverity


class ContainerTrackingView(BaseSchema):
    """Combined result handed to the UI/API layer."""

    record: CanonicalContainerRecord
    current_stage_index: int = Field(..., ge=-1, description="-1 means no stage reached")
    current_stage: Optional[LifecycleStage] = None
    progress_percent: int = Field(..., ge=0, le=100)
    deadline_risk: Optional[DeadlineRisk] = None
    deadlines: list[DeadlineRisk] = Field(default_factory=list)
    timeline: list[TimelineEvent] = Field(default_factory=list)


class DeadlineRiskSummary(BaseSchema):
    """Severity counts across many containers, for monitor dashboards."""

    total: int = 0
    overdue: int = 0
    critical: int = 0
    warning: int = 0
    ok: int = 0
    no_deadline: int = Field(0, description="Containers with neither free-time date")

    @property
    def urgent(self) -> int:
        """Overdue plus critical."""
        return self.overdue + self.critical
