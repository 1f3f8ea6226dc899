"""Storage usage endpoints.

GET /api/storage              -- storage rows (optional serverId filter)
PUT /api/storage/{server_id}  -- replace all storage rows of one server
"""

from fastapi import APIRouter, Depends, Query

from proxmon.database import get_db
from proxmon.schemas.storage import StorageEntry, StorageResponse
from proxmon.services.storage_service import StorageService

router = APIRouter(prefix="/api/storage", tags=["storage"])


def _service(session=Depends(get_db)) -> StorageService:
    return StorageService(session)


@router.get("", response_model=list[StorageResponse])
async def list_storage(
    server_id: int | None = Query(default=None, alias="serverId"),
    svc: StorageService = Depends(_service),
) -> list[StorageResponse]:
    return await svc.list_storage(server_id=server_id)


@router.put("/{server_id}", response_model=list[StorageResponse])
async def replace_storage(
    server_id: int,
    body: list[StorageEntry],
    svc: StorageService = Depends(_service),
) -> list[StorageResponse]:
    return await svc.replace_storage(server_id, body)
