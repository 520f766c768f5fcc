"""
Reconciliation Service - resolve a lookup key to one canonical record.

Providers are tried in a fixed order: live tracking API first, internal
database second. The first structurally valid record wins. A provider that
fails in transport counts as "returned nothing" and the next one is tried.
Not finding the container is a normal outcome (None), not an error.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import structlog

from exceptions import AppError, InvalidSearchTypeError
from integrations.internal_db_client import InternalDbClient
from integrations.live_tracking_client import LiveTrackingClient
from models.container_tracking import CanonicalContainerRecord, RecordSource, SearchBy
from parsers.internal_db_parser import parse_internal_db_record
from parsers.live_api_parser import parse_live_api_record

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Provider:
    """One upstream source: how to fetch a raw payload and how to map it."""
    source: RecordSource
    fetch: Callable[..., Any]
    parse: Callable[[Any], CanonicalContainerRecord]


class ReconciliationService:
    """
    Resolves container / house bill lookups against both providers.

    Stateless: one instance can serve concurrent requests.
    """

    def __init__(
        self,
        live_client: Optional[LiveTrackingClient] = None,
        internal_client: Optional[InternalDbClient] = None
    ):
        live_client = live_client or LiveTrackingClient()
        internal_client = internal_client or InternalDbClient()

        # Preference order
        self.providers: tuple[Provider, ...] = (
            Provider(RecordSource.LIVE_API, live_client.fetch, parse_live_api_record),
            Provider(RecordSource.INTERNAL_DB, internal_client.fetch, parse_internal_db_record),
        )

    def resolve(
        self,
        key: Optional[str],
        search_by: Union[SearchBy, str] = SearchBy.CONTAINER,
        timeout_seconds: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Optional[CanonicalContainerRecord]:
        """
        Resolve a lookup key to a canonical record.

        Args:
            key: Container number or house bill number
            search_by: SearchBy.CONTAINER or SearchBy.HOUSE_BILL
            timeout_seconds: Overall budget; no further provider is called once spent
            cancel_event: Set by the caller to abandon the lookup

        Returns:
            CanonicalContainerRecord tagged with its provider, or None if no
            provider has a valid record

        Raises:
            InvalidSearchTypeError: If search_by is not a known search type
        """
        search_by = _coerce_search_by(search_by)

        key = (key or "").strip()
        if not key:
            logger.info("resolve_skipped_blank_key")
            return None

        deadline = time.monotonic() + timeout_seconds if timeout_seconds is not None else None

        for provider in self.providers:
            if cancel_event is not None and cancel_event.is_set():
                logger.info("resolve_cancelled", key=key, next_source=provider.source.value)
                return None

            remaining = None
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    logger.warning("resolve_deadline_exceeded", key=key, next_source=provider.source.value)
                    return None

            record = self._try_provider(provider, key, search_by, remaining)
            if record is not None:
                logger.info(
                    "container_resolved",
                    key=key,
                    search_by=search_by.value,
                    source=record.source.value,
                    container_number=record.container_number
                )
                return record

        logger.info("container_not_found", key=key, search_by=search_by.value)
        return None

    def _try_provider(
        self,
        provider: Provider,
        key: str,
        search_by: SearchBy,
        timeout: Optional[float]
    ) -> Optional[CanonicalContainerRecord]:
        """Fetch and map from one provider; None if it has nothing usable."""
        try:
            payload = provider.fetch(key, search_by, timeout=timeout)
        except AppError as e:
            logger.warning(
                "provider_failed",
                source=provider.source.value,
                key=key,
                error_code=e.code,
                error=e.message
            )
            return None

        if payload is None:
            logger.debug("provider_returned_nothing", source=provider.source.value, key=key)
            return None

        record = provider.parse(payload)
        if not record.is_valid:
            logger.warning("provider_record_invalid", source=provider.source.value, key=key)
            return None

        return record


def _coerce_search_by(search_by: Union[SearchBy, str]) -> SearchBy:
    try:
        return SearchBy(search_by)
    except ValueError:
        raise InvalidSearchTypeError(str(search_by), [s.value for s in SearchBy])


# Singleton instance
_reconciliation_service: Optional[ReconciliationService] = None


def get_reconciliation_service() -> ReconciliationService:
    """Get the singleton reconciliation service instance."""
    global _reconciliation_service
    if _reconciliation_service is None:
        _reconciliation_service = ReconciliationService()
    return _reconciliation_service
