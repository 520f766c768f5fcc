"""
Unit tests for the container timeline.

Run: pytest tests/unit/test_timeline_service.py -v
"""

from datetime import datetime

from config.lifecycle import TIMELINE_FIELDS
from services.timeline_service import build_timeline
from tests.factories import ContainerRecordFactory


class TestBuildTimeline:
    """Tests for build_timeline()"""

    def test_empty_record_has_no_events(self, now):
        """Absent dates are never emitted."""
        assert build_timeline(ContainerRecordFactory.create(), now) == []

    def test_orders_by_instant_not_field_order(self, now):
        """Strip on Jan 5 comes before date-in on Jan 10."""
        record = ContainerRecordFactory.create(
            date_in=datetime(2024, 1, 10),
            strip_date=datetime(2024, 1, 5),
        )
        timeline = build_timeline(record, now)

        assert [e.field for e in timeline] == ["strip_date", "date_in"]
        assert [e.label for e in timeline] == ["Stripped", "Received at CFS"]

    def test_ties_keep_enumeration_order(self, now):
        """Same instant keeps the fixed field order."""
        same = datetime(2024, 3, 2)
        record = ContainerRecordFactory.create(
            discharge_date=same,
            ata=same,
            vessel_eta=same,
        )
        timeline = build_timeline(record, now)
        assert [e.field for e in timeline] == ["vessel_eta", "ata", "discharge_date"]

    def test_is_past_relative_to_now(self, now):
        """Events at or before now are past; later ones are upcoming."""
        record = ContainerRecordFactory.create(
            date_in=datetime(2024, 3, 1),
            strip_date=now,
            warehouse_free_time_expiry=datetime(2024, 3, 20),
        )
        flags = {e.field: e.is_past for e in build_timeline(record, now)}

        assert flags == {
            "date_in": True,
            "strip_date": True,
            "warehouse_free_time_expiry": False,
        }

    def test_every_field_is_emitted_once(self, now):
        """All thirteen fields appear when every date is set."""
        fields = {field: datetime(2024, 1, i + 1) for i, (field, _) in enumerate(TIMELINE_FIELDS)}
        timeline = build_timeline(ContainerRecordFactory.create(**fields), now)

        assert len(timeline) == 13
        assert [e.field for e in timeline] == [field for field, _ in TIMELINE_FIELDS]
        instants = [e.instant for e in timeline]
        assert instants == sorted(instants)
