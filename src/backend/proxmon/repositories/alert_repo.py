"""Repository for alerts."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.errors import NotFoundError
from proxmon.models.alert import Alert


class AlertRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, alert_id: int) -> Alert:
        result = await self.session.execute(select(Alert).where(Alert.id == alert_id))
        alert = result.scalar_one_or_none()
        if alert is None:
            raise NotFoundError(f"Alert '{alert_id}' not found")
        return alert

    async def list_alerts(self, active_only: bool = False) -> list[Alert]:
        query = select(Alert).order_by(Alert.timestamp, Alert.id)
        if active_only:
            query = query.where(Alert.acknowledged.is_(False))
        rows = await self.session.execute(query)
        return list(rows.scalars().all())

    async def create(self, values: dict[str, Any]) -> Alert:
        alert = Alert(**values)
        self.session.add(alert)
        await self.session.flush()
        await self.session.refresh(alert)
        return alert

    async def acknowledge(self, alert: Alert) -> Alert:
        alert.acknowledged = True
        await self.session.flush()
        return alert
