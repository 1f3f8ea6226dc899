"""VM/LXC service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.repositories.vm_repo import VirtualMachineRepository
from proxmon.schemas.virtual_machine import CreateVMRequest, UpdateVMRequest, VMResponse

log = logging.getLogger(__name__)


class VirtualMachineService:
    def __init__(self, session: AsyncSession) -> None:
        self.repo = VirtualMachineRepository(session)
        self.session = session

    async def list_vms(
        self, server_id: int | None = None, search: str | None = None
    ) -> list[VMResponse]:
        vms = await self.repo.list_vms(server_id=server_id, search=search)
        return [VMResponse.model_validate(vm) for vm in vms]

    async def create_vm(self, body: CreateVMRequest) -> VMResponse:
        async with self.session.begin():
            vm = await self.repo.create(body.model_dump())
        log.info("Created %s %s (vmid %s) on server %s", vm.type, vm.id, vm.vmid, vm.server_id)
        return VMResponse.model_validate(vm)

    async def update_vm(self, vm_id: int, body: UpdateVMRequest) -> VMResponse:
        changes = body.changes()
        async with self.session.begin():
            vm = await self.repo.get_by_id(vm_id)
            if changes:
                vm = await self.repo.update(vm, changes)
        log.info("Updated VM %s: %s", vm_id, sorted(changes))
        return VMResponse.model_validate(vm)
