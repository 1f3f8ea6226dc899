"""Repository for per-server storage usage rows."""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.models.storage import StorageInfo


class StorageRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_storage(self, server_id: int | None = None) -> list[StorageInfo]:
        query = select(StorageInfo).order_by(StorageInfo.id)
        if server_id is not None:
            query = query.where(StorageInfo.server_id == server_id)
        rows = await self.session.execute(query)
        return list(rows.scalars().all())

    async def replace_for_server(
        self, server_id: int, entries: list[dict[str, Any]]
    ) -> list[StorageInfo]:
        """Delete every storage row of server_id, then insert entries for it."""
        await self.session.execute(
            delete(StorageInfo).where(StorageInfo.server_id == server_id)
        )
        rows = [StorageInfo(server_id=server_id, **entry) for entry in entries]
        self.session.add_all(rows)
        await self.session.flush()
        return rows
