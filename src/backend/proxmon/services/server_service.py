"""Server service: CRUD over Proxmox server records.

Transactions are opened here; the repository only issues statements.
Deleting a server leaves its VMs, alerts and storage rows in place.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.repositories.server_repo import ServerRepository
from proxmon.schemas.server import CreateServerRequest, ServerResponse, UpdateServerRequest

log = logging.getLogger(__name__)


class ServerService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = ServerRepository(session)
        self.session = session

    async def list_servers(self, status: str | None = None) -> list[ServerResponse]:
        servers = await self.repo.list_servers(status=status)
        return [ServerResponse.model_validate(s) for s in servers]

    async def get_server(self, server_id: int) -> ServerResponse:
        server = await self.repo.get_by_id(server_id)
        return ServerResponse.model_validate(server)

    async def create_server(self, body: CreateServerRequest) -> ServerResponse:
        async with self.session.begin():
            server = await self.repo.create(body.model_dump())
        log.info("Created server %s (%s at %s:%s)", server.id, server.name, server.host, server.port)
        return ServerResponse.model_validate(server)

    async def update_server(self, server_id: int, body: UpdateServerRequest) -> ServerResponse:
        changes = body.changes()
        async with self.session.begin():
            server = await self.repo.get_by_id(server_id)
            if changes:
                server = await self.repo.update(server, changes)
        log.info("Updated server %s: %s", server_id, sorted(changes))
        return ServerResponse.model_validate(server)

    async def delete_server(self, server_id: int) -> None:
        async with self.session.begin():
            server = await self.repo.get_by_id(server_id)
            await self.repo.delete(server)
        log.info("Deleted server %s", server_id)
