"""Dashboard statistics.

A single pass over the current server, guest and active-alert lists:
  onlineServers  -- servers with status 'online'
  totalVMs/LXC   -- guests split by type
  avgCPU/Memory  -- mean server usage, rounded half-up to one decimal,
                    0 when there are no servers
"""

import math
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.models.server import Server
from proxmon.models.virtual_machine import VirtualMachine
from proxmon.repositories.alert_repo import AlertRepository
from proxmon.repositories.server_repo import ServerRepository
from proxmon.repositories.vm_repo import VirtualMachineRepository
from proxmon.schemas.dashboard import DashboardStats


def _round_to_tenth(value: float) -> float:
    """Round half-up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def compute_stats(
    servers: Sequence[Server],
    vms: Sequence[VirtualMachine],
    active_alerts: int,
) -> DashboardStats:
    online = 0
    cpu_total = 0.0
    memory_total = 0.0
    for server in servers:
        if server.status == "online":
            online += 1
        cpu_total += server.cpu_usage or 0.0
        memory_total += server.memory_usage or 0.0

    total_vms = sum(1 for vm in vms if vm.type == "vm")
    total_lxc = sum(1 for vm in vms if vm.type == "lxc")

    count = len(servers)
    avg_cpu = _round_to_tenth(cpu_total / count) if count else 0.0
    avg_memory = _round_to_tenth(memory_total / count) if count else 0.0

    return DashboardStats(
        total_servers=count,
        online_servers=online,
        total_vms=total_vms,
        total_lxc=total_lxc,
        avg_cpu=avg_cpu,
        avg_memory=avg_memory,
        active_alerts=active_alerts,
    )


class DashboardService:
    def __init__(self, session: AsyncSession) -> None:
        self.server_repo = ServerRepository(session)
        self.vm_repo = VirtualMachineRepository(session)
        self.alert_repo = AlertRepository(session)

    async def get_stats(self) -> DashboardStats:
        servers = await self.server_repo.list_servers()
        vms = await self.vm_repo.list_vms()
        alerts = await self.alert_repo.list_alerts(active_only=True)
        return compute_stats(servers, vms, active_alerts=len(alerts))
