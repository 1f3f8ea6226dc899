"""Tests for VM/LXC listing, creation and updates."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from proxmon.errors import NotFoundError
from proxmon.main import app
from proxmon.models.virtual_machine import VirtualMachine
from proxmon.repositories.vm_repo import VirtualMachineRepository
from proxmon.routers import vms
from proxmon.schemas.virtual_machine import UpdateVMRequest
from proxmon.services.vm_service import VirtualMachineService

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class InMemoryVMRepository:
    def __init__(self) -> None:
        self.rows: dict[int, VirtualMachine] = {}

    async def get_by_id(self, vm_id: int) -> VirtualMachine:
        if vm_id not in self.rows:
            raise NotFoundError(f"VM '{vm_id}' not found")
        return self.rows[vm_id]

    async def list_vms(self, server_id=None, search=None) -> list[VirtualMachine]:
        rows = sorted(self.rows.values(), key=lambda v: v.id)
        if server_id is not None:
            rows = [v for v in rows if v.server_id == server_id]
        if search:
            rows = [v for v in rows if search.lower() in v.name.lower()]
        return rows

    async def create(self, values: dict[str, Any]) -> VirtualMachine:
        vm = VirtualMachine(**values)
        vm.id = len(self.rows) + 1
        self.rows[vm.id] = vm
        return vm

    async def update(self, vm: VirtualMachine, values: dict[str, Any]) -> VirtualMachine:
        for key, value in values.items():
            setattr(vm, key, value)
        return vm


def _vm_body(server_id: int, vmid: int, name: str, type: str = "vm") -> dict:
    return {
        "serverId": server_id,
        "vmid": vmid,
        "name": name,
        "type": type,
        "status": "running",
        "cpuUsage": 10.0,
        "memoryUsage": 20.0,
        "memoryTotal": 4.0,
        "uptime": 3600,
        "node": "pve-node-01",
    }


@pytest.fixture
def repo() -> InMemoryVMRepository:
    return InMemoryVMRepository()


@pytest.fixture
def api(client, session, repo):
    svc = VirtualMachineService(session)
    svc.repo = repo
    app.dependency_overrides[vms._service] = lambda: svc
    return client


# ---------------------------------------------------------------------------
# Repository query construction
# ---------------------------------------------------------------------------


class TestVirtualMachineRepositoryQuery:
    async def _captured_sql(self, **filters) -> str:
        session = MagicMock()
        result = MagicMock()
        result.scalars.return_value.all.return_value = []
        session.execute = AsyncMock(return_value=result)

        await VirtualMachineRepository(session).list_vms(**filters)

        stmt = session.execute.call_args[0][0]
        return str(stmt.compile(compile_kwargs={"literal_binds": True}))

    async def test_server_filter_adds_where_clause(self):
        sql = await self._captured_sql(server_id=3)
        assert "virtual_machines.server_id = 3" in sql

    async def test_no_filter_has_no_where_clause(self):
        sql = await self._captured_sql()
        assert "WHERE" not in sql
        assert "ORDER BY virtual_machines.id" in sql

    async def test_search_is_case_insensitive(self):
        sql = await self._captured_sql(search="Web")
        assert "lower(virtual_machines.name)" in sql


# ---------------------------------------------------------------------------
# HTTP endpoints
# ---------------------------------------------------------------------------


class TestVMEndpoints:
    async def test_filter_by_server_id_returns_only_matching_rows(self, api):
        await api.post("/api/vms", json=_vm_body(1, 100, "web"))
        await api.post("/api/vms", json=_vm_body(2, 101, "db"))
        await api.post("/api/vms", json=_vm_body(1, 200, "dns", type="lxc"))

        response = await api.get("/api/vms", params={"serverId": 1})

        assert response.status_code == 200
        rows = response.json()
        assert {vm["serverId"] for vm in rows} == {1}
        assert [vm["name"] for vm in rows] == ["web", "dns"]

    async def test_list_without_filter_returns_all(self, api):
        await api.post("/api/vms", json=_vm_body(1, 100, "web"))
        await api.post("/api/vms", json=_vm_body(2, 101, "db"))

        response = await api.get("/api/vms")

        assert len(response.json()) == 2

    async def test_search_matches_name_substring(self, api):
        await api.post("/api/vms", json=_vm_body(1, 100, "Web-Frontend"))
        await api.post("/api/vms", json=_vm_body(1, 101, "postgres"))

        response = await api.get("/api/vms", params={"search": "front"})

        assert [vm["name"] for vm in response.json()] == ["Web-Frontend"]

    async def test_create_returns_201(self, api):
        response = await api.post("/api/vms", json=_vm_body(1, 100, "web"))

        assert response.status_code == 201
        assert response.json()["id"] == 1
        assert response.json()["type"] == "vm"

    async def test_create_rejects_unknown_type(self, api):
        response = await api.post("/api/vms", json=_vm_body(1, 100, "web", type="docker"))

        assert response.status_code == 400

    async def test_patch_updates_status(self, api):
        await api.post("/api/vms", json=_vm_body(1, 100, "web"))

        response = await api.patch("/api/vms/1", json={"status": "stopped", "cpuUsage": 0})

        assert response.status_code == 200
        assert response.json()["status"] == "stopped"
        assert response.json()["cpuUsage"] == 0

    async def test_patch_can_clear_node(self, api):
        await api.post("/api/vms", json=_vm_body(1, 100, "web"))

        response = await api.patch("/api/vms/1", json={"node": None})

        assert response.status_code == 200
        assert response.json()["node"] is None

    async def test_patch_missing_vm_returns_404(self, api):
        response = await api.patch("/api/vms/99", json={"status": "stopped"})

        assert response.status_code == 404


class TestUpdateVMRequest:
    def test_unset_fields_are_not_changes(self):
        assert UpdateVMRequest(name="x").changes() == {"name": "x"}

    def test_null_status_is_rejected(self):
        with pytest.raises(ValueError):
            UpdateVMRequest.model_validate({"status": None})
