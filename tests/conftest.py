"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest
from unittest.mock import MagicMock, patch
from datetime import datetime
from typing import Generator

# ===================
# MOCK SUPABASE CLIENT
# ===================

class MockSupabaseResponse:
    """Mock Supabase query response."""

    def __init__(self, data: list = None, count: int = None):
        self.data = data or []
        self.count = count if count is not None else len(self.data)


class MockSupabaseQuery:
    """Mock Supabase query builder with chainable methods."""

    def __init__(self, data: list = None, count: int = None, error: Exception = None):
        self._data = data or []
        self._count = count
        self._error = error
        self.filters = []

    def select(self, *args, **kwargs):
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, **kwargs):
        return self

    def limit(self, count):
        self._data = self._data[:count]
        return self

    def execute(self) -> MockSupabaseResponse:
        if self._error is not None:
            raise self._error
        return MockSupabaseResponse(
            data=self._data,
            count=self._count if self._count is not None else len(self._data)
        )


class MockSupabaseTable:
    """Mock Supabase table with configurable responses."""

    def __init__(self, data: list = None, count: int = None, error: Exception = None):
        self._data = data or []
        self._count = count
        self._error = error
        self.queries = []

    def select(self, *args, **kwargs):
        query = MockSupabaseQuery(self._data.copy(), self._count, self._error)
        self.queries.append(query)
        return query


class MockSupabaseClient:
    """Mock Supabase client."""

    def __init__(self):
        self._tables = {}

    def set_table_data(self, table_name: str, data: list, count: int = None):
        """Configure mock data for a table."""
        self._tables[table_name] = MockSupabaseTable(data, count)

    def set_table_error(self, table_name: str, error: Exception):
        """Make every query on a table raise."""
        self._tables[table_name] = MockSupabaseTable(error=error)

    def table(self, name: str) -> MockSupabaseTable:
        """Get mock table."""
        if name not in self._tables:
            self._tables[name] = MockSupabaseTable()
        return self._tables[name]


# ===================
# FIXTURES
# ===================

@pytest.fixture
def mock_supabase() -> MockSupabaseClient:
    """
    Create a mock Supabase client.

    Usage:
        def test_something(mock_supabase):
            mock_supabase.set_table_data("cfs_containers", [
                {"container_number": "FFAU2413670", ...}
            ])
    """
    return MockSupabaseClient()


@pytest.fixture
def mock_db(mock_supabase) -> Generator:
    """
    Patch the database client with mock.

    Usage:
        def test_something(mock_db, mock_supabase):
            mock_supabase.set_table_data("cfs_containers", [...])
            # Now any code using get_supabase_client() gets the mock
    """
    with patch("config.database.get_supabase_client", return_value=mock_supabase):
        with patch("integrations.internal_db_client.get_supabase_client", return_value=mock_supabase):
            yield mock_supabase


@pytest.fixture
def now() -> datetime:
    """Fixed reference time: Mar 10, 2024 at noon UTC."""
    return datetime(2024, 3, 10, 12, 0, 0)


@pytest.fixture
def live_client() -> MagicMock:
    """Live tracking client stub that finds nothing."""
    client = MagicMock()
    client.fetch.return_value = None
    return client


@pytest.fixture
def internal_client() -> MagicMock:
    """Internal database client stub that finds nothing."""
    client = MagicMock()
    client.fetch.return_value = None
    return client


@pytest.fixture
def sample_live_payload() -> dict:
    """Live API payload wrapped in the response envelope."""
    return {
        "response": {
            "status": 200,
            "result": [
                {
                    "containerNumber": "ffau2413670",
                    "masterBillNumber": "MEDU1234567",
                    "jobNumber": "J-2024-0042",
                    "stgReference": "STG-88812",
                    "customerReference": "PO-5521",
                    "status": "Available",
                    "location": "STG Elizabeth",
                    "vesselName": "MSC ISTANBUL",
                    "vesselETA": "3/1/24",
                    "ata": "2024-03-02T08:30:00Z",
                    "availableAtPier": "3/3/2024",
                    "dateIn": "2024-03-05",
                    "stripDate": "",
                    "availableAtWarehouse": "3/7/24",
                    "pierLFD": "3/8/24",
                    "warehouseFreeTimeExpiry": "3/12/24",
                }
            ],
        }
    }


@pytest.fixture
def sample_internal_row() -> dict:
    """Internal database row using historical column names."""
    return {
        "id": 17,
        "container_number": "FFAU2413670",
        "mbl_number": "MEDU1234567",
        "job_lot_no": "J-2024-0042",
        "customer_code": "ACME",
        "lifecycle_stage": "AT_CFS",
        "cfs_code": "STG-NJ",
        "vessel_name": "MSC ISTANBUL",
        "eta": "2024-03-01",
        "available_at_pier": "2024-03-03",
        "date_in": "2024-03-05T14:00:00",
        "strip_date": "2024-03-06",
        "pier_lfd": "2024-03-08",
        "warehouse_lfd": None,
    }


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client():
    """
    Create FastAPI test client.

    Usage:
        def test_endpoint(test_client):
            response = test_client.get("/api/tracking/FFAU2413670")
    """
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)
