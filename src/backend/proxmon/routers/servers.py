"""Proxmox server endpoints.

GET    /api/servers        -- list servers (optional status filter)
GET    /api/servers/{id}   -- single server
POST   /api/servers        -- register a server
PATCH  /api/servers/{id}   -- partial update
DELETE /api/servers/{id}   -- remove a server (VMs/alerts/storage are kept)
"""

from fastapi import APIRouter, Depends, Query, status

from proxmon.database import get_db
from proxmon.schemas.server import CreateServerRequest, ServerResponse, UpdateServerRequest
from proxmon.services.server_service import ServerService

router = APIRouter(prefix="/api/servers", tags=["servers"])


def _service(session=Depends(get_db)) -> ServerService:
    return ServerService(session)


@router.get("", response_model=list[ServerResponse])
async def list_servers(
    server_status: str | None = Query(default=None, alias="status"),
    svc: ServerService = Depends(_service),
) -> list[ServerResponse]:
    return await svc.list_servers(status=server_status)


@router.get("/{server_id}", response_model=ServerResponse)
async def get_server(
    server_id: int,
    svc: ServerService = Depends(_service),
) -> ServerResponse:
    return await svc.get_server(server_id)


@router.post("", response_model=ServerResponse, status_code=status.HTTP_201_CREATED)
async def create_server(
    body: CreateServerRequest,
    svc: ServerService = Depends(_service),
) -> ServerResponse:
    return await svc.create_server(body)


@router.patch("/{server_id}", response_model=ServerResponse)
async def update_server(
    server_id: int,
    body: UpdateServerRequest,
    svc: ServerService = Depends(_service),
) -> ServerResponse:
    return await svc.update_server(server_id, body)


@router.delete("/{server_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_server(
    server_id: int,
    svc: ServerService = Depends(_service),
) -> None:
    await svc.delete_server(server_id)
