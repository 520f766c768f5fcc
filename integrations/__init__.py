"""
Upstream provider clients.

Transport only: each client returns the provider's raw payload or None, and
raises an AppError subclass on transport failure.
"""

from integrations.live_tracking_client import LiveTrackingClient
from integrations.internal_db_client import InternalDbClient

__all__ = [
    "LiveTrackingClient",
    "InternalDbClient",
]
