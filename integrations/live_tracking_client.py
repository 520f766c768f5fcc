"""
Live tracking API client.

Thin transport wrapper around the no-code platform's container availability
endpoint. Returns the decoded JSON body untouched; mapping it into a
canonical record is the job of parsers.live_api_parser.
"""

from typing import Any, Optional

import requests
import structlog

from config import settings
from exceptions import ExternalServiceError
from models.container_tracking import SearchBy

logger = structlog.get_logger(__name__)

SERVICE_NAME = "live_tracking_api"


class LiveTrackingClient:
    """Client for the live tracking API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.base_url = (base_url or settings.live_api_base_url or "").rstrip("/")
        self.token = token if token is not None else settings.live_api_token
        self.timeout = timeout or settings.live_api_timeout_seconds
        self.session = session or requests.Session()

    @property
    def configured(self) -> bool:
        """Check if a base URL is set."""
        return bool(self.base_url)

    def fetch(
        self,
        key: str,
        search_by: SearchBy = SearchBy.CONTAINER,
        timeout: Optional[float] = None
    ) -> Optional[Any]:
        """
        Look up a container or house bill.

        Args:
            key: Container number or house bill number
            search_by: Which kind of key this is
            timeout: Request timeout in seconds (defaults to the configured one)

        Returns:
            Decoded JSON body, or None if the API has nothing for this key

        Raises:
            ExternalServiceError: On transport failure, non-2xx status or bad JSON
        """
        if not self.configured:
            logger.warning("live_api_not_configured_skipping_fetch")
            return None

        params = {"endpoint_path": "hbl" if search_by == SearchBy.HOUSE_BILL else "container"}
        if search_by == SearchBy.HOUSE_BILL:
            params["houseBillNumber"] = key
        else:
            params["containerNumber"] = key

        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.base_url}/STG"

        try:
            logger.info("fetching_live_tracking", key=key, search_by=search_by.value)

            response = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=timeout or self.timeout
            )

            if response.status_code == 404:
                logger.info("live_tracking_not_found", key=key)
                return None

            response.raise_for_status()

            if not response.content:
                return None

            return response.json()

        except requests.exceptions.RequestException as e:
            logger.error("live_tracking_request_failed", key=key, error=str(e))
            raise ExternalServiceError(
                SERVICE_NAME,
                f"Live tracking request failed: {e}",
                details={"key": key}
            ) from e
        except ValueError as e:
            logger.error("live_tracking_invalid_json", key=key, error=str(e))
            raise ExternalServiceError(
                SERVICE_NAME,
                "Live tracking API returned invalid JSON",
                details={"key": key}
            ) from e
