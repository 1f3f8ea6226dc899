"""Repository for Proxmox server records.

All DB access for the servers table goes through this class.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.errors import NotFoundError
from proxmon.models.server import Server


class ServerRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, server_id: int) -> Server:
        result = await self.session.execute(select(Server).where(Server.id == server_id))
        server = result.scalar_one_or_none()
        if server is None:
            raise NotFoundError(f"Server '{server_id}' not found")
        return server

    async def list_servers(self, status: str | None = None) -> list[Server]:
        query = select(Server).order_by(Server.id)
        if status:
            query = query.where(Server.status == status)
        rows = await self.session.execute(query)
        return list(rows.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Server))
        return result.scalar_one()

    async def create(self, values: dict[str, Any]) -> Server:
        server = Server(**values)
        self.session.add(server)
        await self.session.flush()
        # Pull server-side defaults (last_seen) back onto the instance
        await self.session.refresh(server)
        return server

    async def update(self, server: Server, values: dict[str, Any]) -> Server:
        for key, value in values.items():
            setattr(server, key, value)
        await self.session.flush()
        await self.session.refresh(server)
        return server

    async def delete(self, server: Server) -> None:
        await self.session.delete(server)
        await self.session.flush()
