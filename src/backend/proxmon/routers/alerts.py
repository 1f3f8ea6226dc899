"""Alert endpoints.

GET   /api/alerts                   -- all alerts; active=true (exactly) keeps unacknowledged only
POST  /api/alerts                   -- record an alert
PATCH /api/alerts/{id}/acknowledge  -- mark an alert acknowledged
"""

from fastapi import APIRouter, Depends, Query, status

from proxmon.database import get_db
from proxmon.schemas.alert import AlertResponse, CreateAlertRequest
from proxmon.services.alert_service import AlertService

router = APIRouter(prefix="/api/alerts", tags=["alerts"])


def _service(session=Depends(get_db)) -> AlertService:
    return AlertService(session)


@router.get("", response_model=list[AlertResponse])
async def list_alerts(
    active: str | None = Query(default=None),
    svc: AlertService = Depends(_service),
) -> list[AlertResponse]:
    return await svc.list_alerts(active_only=active == "true")


@router.post("", response_model=AlertResponse, status_code=status.HTTP_201_CREATED)
async def create_alert(
    body: CreateAlertRequest,
    svc: AlertService = Depends(_service),
) -> AlertResponse:
    return await svc.create_alert(body)


@router.patch("/{alert_id}/acknowledge", response_model=AlertResponse)
async def acknowledge_alert(
    alert_id: int,
    svc: AlertService = Depends(_service),
) -> AlertResponse:
    return await svc.acknowledge_alert(alert_id)
