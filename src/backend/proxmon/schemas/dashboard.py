"""Pydantic schema for the dashboard summary.

Key names are fixed by the dashboard client (``totalVMs``, ``avgCPU``...),
which the camelCase alias generator would not produce, so they are explicit.
"""

from pydantic import BaseModel, ConfigDict, Field


class DashboardStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_servers: int = Field(alias="totalServers")
    online_servers: int = Field(alias="onlineServers")
    total_vms: int = Field(alias="totalVMs")
    total_lxc: int = Field(alias="totalLXC")
    avg_cpu: float = Field(alias="avgCPU")
    avg_memory: float = Field(alias="avgMemory")
    active_alerts: int = Field(alias="activeAlerts")
