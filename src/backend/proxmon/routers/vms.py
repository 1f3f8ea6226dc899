"""VM and LXC container endpoints.

GET   /api/vms        -- list guests (optional serverId and name search filters)
POST  /api/vms        -- register a guest
PATCH /api/vms/{id}   -- partial update
"""

from fastapi import APIRouter, Depends, Query, status

from proxmon.database import get_db
from proxmon.schemas.virtual_machine import CreateVMRequest, UpdateVMRequest, VMResponse
from proxmon.services.vm_service import VirtualMachineService

router = APIRouter(prefix="/api/vms", tags=["vms"])


def _service(session=Depends(get_db)) -> VirtualMachineService:
    return VirtualMachineService(session)


@router.get("", response_model=list[VMResponse])
async def list_vms(
    server_id: int | None = Query(default=None, alias="serverId"),
    search: str | None = Query(default=None),
    svc: VirtualMachineService = Depends(_service),
) -> list[VMResponse]:
    return await svc.list_vms(server_id=server_id, search=search)


@router.post("", response_model=VMResponse, status_code=status.HTTP_201_CREATED)
async def create_vm(
    body: CreateVMRequest,
    svc: VirtualMachineService = Depends(_service),
) -> VMResponse:
    return await svc.create_vm(body)


@router.patch("/{vm_id}", response_model=VMResponse)
async def update_vm(
    vm_id: int,
    body: UpdateVMRequest,
    svc: VirtualMachineService = Depends(_service),
) -> VMResponse:
    return await svc.update_vm(vm_id, body)
