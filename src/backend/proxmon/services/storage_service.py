"""Storage usage service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.repositories.storage_repo import StorageRepository
from proxmon.schemas.storage import StorageEntry, StorageResponse

log = logging.getLogger(__name__)


class StorageService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = StorageRepository(session)
        self.session = session

    async def list_storage(self, server_id: int | None = None) -> list[StorageResponse]:
        rows = await self.repo.list_storage(server_id=server_id)
        return [StorageResponse.model_validate(r) for r in rows]

    async def replace_storage(
        self, server_id: int, entries: list[StorageEntry]
    ) -> list[StorageResponse]:
        async with self.session.begin():
            rows = await self.repo.replace_for_server(
                server_id, [e.model_dump() for e in entries]
            )
        log.info("Replaced storage for server %s with %d entries", server_id, len(rows))
        return [StorageResponse.model_validate(r) for r in rows]
