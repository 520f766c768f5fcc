"""
Test data factories.

Uses factory pattern to generate consistent test data.
"""

from datetime import datetime
from typing import Optional

from models.container_tracking import CanonicalContainerRecord, RecordSource


class ContainerRecordFactory:
    """
    Factory for canonical container records.

    Usage:
        # Bare record with no dates
        record = ContainerRecordFactory.create()

        # With dates
        record = ContainerRecordFactory.create(date_in=datetime(2024, 1, 10))
    """

    _counter = 0

    @classmethod
    def _next_counter(cls) -> int:
        cls._counter += 1
        return cls._counter

    @classmethod
    def create(
        cls,
        container_number: Optional[str] = None,
        source: RecordSource = RecordSource.LIVE_API,
        **fields
    ) -> CanonicalContainerRecord:
        """
        Create a single record.

        Args:
            container_number: Auto-generated if not provided
            source: Provenance tag
            **fields: Any other canonical field

        Returns:
            CanonicalContainerRecord
        """
        counter = cls._next_counter()
        return CanonicalContainerRecord(
            container_number=container_number or f"TEST{counter:07d}",
            source=source,
            **fields
        )

    @classmethod
    def with_lifecycle(cls, **fields) -> CanonicalContainerRecord:
        """Record that reached every stage up to and including stripping."""
        defaults = {
            "vessel_eta": datetime(2024, 1, 1),
            "available_at_pier": datetime(2024, 1, 3),
            "date_in": datetime(2024, 1, 5),
            "strip_date": datetime(2024, 1, 6),
        }
        defaults.update(fields)
        return cls.create(**defaults)
