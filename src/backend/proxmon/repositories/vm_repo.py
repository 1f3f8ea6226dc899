"""Repository for VMs and LXC containers."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.errors import NotFoundError
from proxmon.models.virtual_machine import VirtualMachine


class VirtualMachineRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, vm_id: int) -> VirtualMachine:
        result = await self.session.execute(
            select(VirtualMachine).where(VirtualMachine.id == vm_id)
        )
        vm = result.scalar_one_or_none()
        if vm is None:
            raise NotFoundError(f"VM '{vm_id}' not found")
        return vm

    async def list_vms(
        self,
        server_id: int | None = None,
        search: str | None = None,
    ) -> list[VirtualMachine]:
        query = select(VirtualMachine).order_by(VirtualMachine.id)
        if server_id is not None:
            query = query.where(VirtualMachine.server_id == server_id)
        if search:
            query = query.where(VirtualMachine.name.icontains(search, autoescape=True))
        rows = await self.session.execute(query)
        return list(rows.scalars().all())

    async def create(self, values: dict[str, Any]) -> VirtualMachine:
        vm = VirtualMachine(**values)
        self.session.add(vm)
        await self.session.flush()
        await self.session.refresh(vm)
        return vm

    async def update(self, vm: VirtualMachine, values: dict[str, Any]) -> VirtualMachine:
        for key, value in values.items():
            setattr(vm, key, value)
        await self.session.flush()
        await self.session.refresh(vm)
        return vm
