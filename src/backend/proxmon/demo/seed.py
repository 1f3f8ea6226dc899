"""Demo inventory for a fresh database.

The dashboard does not poll Proxmox; it shows whatever rows are stored.
seed_demo_data() fills an empty database with a small, fixed cluster so the
UI has something to render. It is called from the app lifespan when
SEED_DEMO_DATA is enabled and never touches a database that already holds
servers.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from proxmon.repositories.alert_repo import AlertRepository
from proxmon.repositories.server_repo import ServerRepository
from proxmon.repositories.storage_repo import StorageRepository
from proxmon.repositories.vm_repo import VirtualMachineRepository

logger = logging.getLogger(__name__)

_DAY = 86400

DEMO_SERVERS: list[dict] = [
    {
        "name": "pve-node-01",
        "host": "192.168.1.10",
        "username": "root@pam",
        "status": "online",
        "cpu_usage": 42.5,
        "memory_usage": 68.2,
        "memory_total": 128.0,
        "uptime": 45 * _DAY,
        "vm_count": 2,
        "lxc_count": 1,
    },
    {
        "name": "pve-node-02",
        "host": "192.168.1.11",
        "username": "root@pam",
        "status": "warning",
        "cpu_usage": 87.1,
        "memory_usage": 91.4,
        "memory_total": 64.0,
        "uptime": 12 * _DAY,
        "vm_count": 1,
        "lxc_count": 2,
    },
    {
        "name": "pve-backup",
        "host": "192.168.1.20",
        "username": "monitor@pve",
        "status": "offline",
        "memory_total": 32.0,
    },
]

# Keyed by index into DEMO_SERVERS
DEMO_GUESTS: dict[int, list[dict]] = {
    0: [
        {"vmid": 100, "name": "web-frontend", "type": "vm", "status": "running",
         "cpu_usage": 23.0, "memory_usage": 55.0, "memory_total": 8.0, "uptime": 30 * _DAY},
        {"vmid": 101, "name": "postgres-main", "type": "vm", "status": "running",
         "cpu_usage": 61.5, "memory_usage": 78.0, "memory_total": 32.0, "uptime": 45 * _DAY},
        {"vmid": 200, "name": "dns-resolver", "type": "lxc", "status": "running",
         "cpu_usage": 2.1, "memory_usage": 18.0, "memory_total": 1.0, "uptime": 45 * _DAY},
    ],
    1: [
        {"vmid": 102, "name": "build-runner", "type": "vm", "status": "warning",
         "cpu_usage": 97.3, "memory_usage": 88.0, "memory_total": 16.0, "uptime": 3 * _DAY},
        {"vmid": 201, "name": "grafana", "type": "lxc", "status": "running",
         "cpu_usage": 8.4, "memory_usage": 40.0, "memory_total": 2.0, "uptime": 12 * _DAY},
        {"vmid": 202, "name": "legacy-mail", "type": "lxc", "status": "stopped"},
    ],
}

DEMO_STORAGE: dict[int, list[dict]] = {
    0: [
        {"storage": "local", "used": 48.0, "total": 100.0, "type": "dir"},
        {"storage": "local-lvm", "used": 612.0, "total": 900.0, "type": "lvmthin"},
    ],
    1: [
        {"storage": "local", "used": 71.0, "total": 100.0, "type": "dir"},
        {"storage": "ceph-pool", "used": 1830.0, "total": 2000.0, "type": "rbd"},
    ],
    2: [
        {"storage": "backup-nfs", "used": 3400.0, "total": 8000.0, "type": "nfs"},
    ],
}


async def seed_demo_data(session: AsyncSession) -> int:
    """Insert the demo inventory if no server exists.

    Returns the number of servers inserted (0 when the database was not empty).
    """
    servers = ServerRepository(session)
    if await servers.count() > 0:
        logger.info("Servers already present, skipping demo data")
        return 0

    vms = VirtualMachineRepository(session)
    storage = StorageRepository(session)
    alerts = AlertRepository(session)

    server_ids: list[int] = []
    for index, values in enumerate(DEMO_SERVERS):
        server = await servers.create(values)
        server_ids.append(server.id)
        for guest in DEMO_GUESTS.get(index, []):
            await vms.create({"server_id": server.id, **guest})
        await storage.replace_for_server(server.id, DEMO_STORAGE.get(index, []))

    warn_node, offline_node = server_ids[1], server_ids[2]
    await alerts.create({
        "server_id": warn_node,
        "type": "warning",
        "message": "pve-node-02 CPU usage above 85%",
    })
    await alerts.create({
        "server_id": warn_node,
        "type": "critical",
        "message": "ceph-pool storage usage above 90%",
    })
    await alerts.create({
        "server_id": offline_node,
        "type": "critical",
        "message": "pve-backup is not responding",
    })
    await alerts.create({
        "server_id": server_ids[0],
        "type": "info",
        "message": "pve-node-01 updated to latest kernel",
        "acknowledged": True,
    })

    await session.commit()
    logger.info("Inserted demo data: %d servers", len(server_ids))
    return len(server_ids)
