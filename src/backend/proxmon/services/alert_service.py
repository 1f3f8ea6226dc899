"""Alert service: recording and acknowledging alerts."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.repositories.alert_repo import AlertRepository
from proxmon.schemas.alert import AlertResponse, CreateAlertRequest

log = logging.getLogger(__name__)


class AlertService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = AlertRepository(session)
        self.session = session

    async def list_alerts(self, active_only: bool = False) -> list[AlertResponse]:
        alerts = await self.repo.list_alerts(active_only=active_only)
        return [AlertResponse.model_validate(a) for a in alerts]

    async def create_alert(self, body: CreateAlertRequest) -> AlertResponse:
        async with self.session.begin():
            alert = await self.repo.create(body.model_dump())
        log.info("Recorded %s alert %s: %s", alert.type, alert.id, alert.message)
        return AlertResponse.model_validate(alert)

    async def acknowledge_alert(self, alert_id: int) -> AlertResponse:
        async with self.session.begin():
            alert = await self.repo.get_by_id(alert_id)
            alert = await self.repo.acknowledge(alert)
        log.info("Acknowledged alert %s", alert_id)
        return AlertResponse.model_validate(alert)
