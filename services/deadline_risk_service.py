"""
Free-time deadline risk.

A container has up to two free-time deadlines: the pier Last Free Day and
the warehouse free time expiry. The most urgent one drives alerting.

Severity bands (days remaining):
    < 0   OVERDUE
    0-3   CRITICAL
    4-7   WARNING
    > 7   OK
"""

from datetime import datetime
from typing import Iterable, Optional

from config.lifecycle import CRITICAL_MAX_DAYS, DEADLINE_FIELDS, WARNING_MAX_DAYS
from models.container_tracking import (
    CanonicalContainerRecord,
    DeadlineRisk,
    DeadlineRiskSummary,
    DeadlineSeverity,
)
from utils.date_utils import days_until


def classify_days_remaining(days_remaining: int) -> DeadlineSeverity:
    """Map days remaining to a severity band."""
    if days_remaining < 0:
        return DeadlineSeverity.OVERDUE
    if days_remaining <= CRITICAL_MAX_DAYS:
        return DeadlineSeverity.CRITICAL
    if days_remaining <= WARNING_MAX_DAYS:
        return DeadlineSeverity.WARNING
    return DeadlineSeverity.OK


def evaluate_all_deadlines(
    record: CanonicalContainerRecord,
    now: datetime
) -> list[DeadlineRisk]:
    """
    Risk for every deadline present on the record, most urgent first.

    Ties keep the DEADLINE_FIELDS order (pier before warehouse).
    """
    risks = []
    for field, label in DEADLINE_FIELDS:
        deadline = record.date_of(field)
        if deadline is None:
            continue

        remaining = days_until(deadline, now)
        risks.append(DeadlineRisk(
            field=field,
            label=label,
            date=deadline,
            days_remaining=remaining,
            severity=classify_days_remaining(remaining),
        ))

    return sorted(risks, key=lambda risk: risk.days_remaining)


def evaluate_deadline_risk(
    record: CanonicalContainerRecord,
    now: datetime
) -> Optional[DeadlineRisk]:
    """
    The single most urgent deadline.

    Returns:
        DeadlineRisk with the fewest days remaining, or None if the record
        has no deadline dates.
    """
    risks = evaluate_all_deadlines(record, now)
    return risks[0] if risks else None


def summarize_deadline_risks(
    records: Iterable[CanonicalContainerRecord],
    now: datetime
) -> DeadlineRiskSummary:
    """
    Count containers per severity of their most urgent deadline.

    Args:
        records: Canonical records, one per container
        now: Reference time

    Returns:
        DeadlineRiskSummary; records without deadlines count as no_deadline
    """
    summary = DeadlineRiskSummary()
    for record in records:
        summary.total += 1
        risk = evaluate_deadline_risk(record, now)
        if risk is None:
            summary.no_deadline += 1
        elif risk.severity == DeadlineSeverity.OVERDUE:
            summary.overdue += 1
        elif risk.severity == DeadlineSeverity.CRITICAL:
            summary.critical += 1
        elif risk.severity == DeadlineSeverity.WARNING:
            summary.warning += 1
        else:
            summary.ok += 1
    return summary
