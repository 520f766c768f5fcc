"""
Internal database client.

Reads raw container rows from the internal Postgres database through Supabase.
Rows are returned as-is; parsers.internal_db_parser maps them.
"""

from typing import Optional

import structlog

from config import settings
from config.database import get_supabase_client
from exceptions import DatabaseError
from models.container_tracking import SearchBy

logger = structlog.get_logger(__name__)


class InternalDbClient:
    """Client for container rows in the internal database."""

    def __init__(
        self,
        container_table: Optional[str] = None,
        hbl_table: Optional[str] = None
    ):
        self.container_table = container_table or settings.container_table
        self.hbl_table = hbl_table or settings.hbl_table
        self._db = None

    @property
    def db(self):
        """Supabase client, created on first use."""
        if self._db is None:
            self._db = get_supabase_client()
        return self._db

    def fetch(
        self,
        key: str,
        search_by: SearchBy = SearchBy.CONTAINER,
        timeout: Optional[float] = None
    ) -> Optional[dict]:
        """
        Look up a container row by container number or house bill.

        Args:
            key: Container number or house bill number
            search_by: Which kind of key this is
            timeout: Unused; the Supabase client applies its own timeout

        Returns:
            Raw row dict, or None if no row matches

        Raises:
            DatabaseError: If a query fails
        """
        logger.debug("fetching_internal_container", key=key, search_by=search_by.value)

        try:
            container_number = key
            if search_by == SearchBy.HOUSE_BILL:
                container_number = self._container_for_house_bill(key)
                if not container_number:
                    logger.info("house_bill_not_found", house_bill_number=key)
                    return None

            result = self.db.table(self.container_table).select("*").eq(
                "container_number", container_number.upper()
            ).limit(1).execute()

            if not result.data:
                logger.info("internal_container_not_found", key=key)
                return None

            return result.data[0]

        except DatabaseError:
            raise
        except Exception as e:
            logger.error("internal_container_fetch_failed", key=key, error=str(e))
            raise DatabaseError("select", str(e), details={"key": key}) from e

    def _container_for_house_bill(self, house_bill_number: str) -> Optional[str]:
        result = self.db.table(self.hbl_table).select("container_number").eq(
            "house_bill_number", house_bill_number
        ).limit(1).execute()

        if not result.data:
            return None
        return result.data[0].get("container_number")
