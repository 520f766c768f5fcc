"""
Container Tracking API Routes.

Look up a container by container number or house bill and return its
canonical record, lifecycle stage, deadline risk and timeline.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from services.container_tracking_service import get_container_tracking_service
from models.container_tracking import ContainerTrackingView, SearchBy
from exceptions import ContainerNotFoundError, ValidationError

router = APIRouter(prefix="/api/tracking", tags=["tracking"])


@router.get(
    "/{key}",
    response_model=ContainerTrackingView,
    summary="Track a container or house bill"
)
def track_container(
    key: str,
    search_by: SearchBy = Query(SearchBy.CONTAINER, description="Kind of lookup key"),
    timeout_seconds: Optional[float] = Query(None, gt=0, le=300, description="Lookup budget in seconds")
):
    """
    Track a container.

    Args:
        key: Container number or house bill number
        search_by: container or houseBill
        timeout_seconds: Optional budget for the provider lookups

    Returns:
        Combined tracking view

    Raises:
        404 CONTAINER_NOT_FOUND if neither provider knows the key
    """
    service = get_container_tracking_service()
    try:
        view = service.track(key, search_by, timeout_seconds=timeout_seconds)
    except ValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())

    if view is None:
        error = ContainerNotFoundError(key, search_by.value)
        raise HTTPException(status_code=error.status_code, detail=error.to_dict())

    return view
