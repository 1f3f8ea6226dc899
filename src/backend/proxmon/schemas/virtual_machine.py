"""Pydantic schemas for VMs and LXC containers."""

from typing import ClassVar

from pydantic import Field, field_validator

from proxmon.schemas.base import ApiModel, PartialUpdate, check_choice

GUEST_TYPES = frozenset({"vm", "lxc"})
GUEST_STATUSES = frozenset({"running", "stopped", "warning"})


class CreateVMRequest(ApiModel):
    server_id: int
    vmid: int = Field(ge=1)
    name: str = Field(min_length=1)
    type: str
    status: str
    cpu_usage: float = Field(default=0.0, ge=0, le=100)
    memory_usage: float = Field(default=0.0, ge=0, le=100)
    memory_total: float = Field(default=0.0, ge=0)
    uptime: int = Field(default=0, ge=0)
    node: str | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        return check_choice("type", v, GUEST_TYPES)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        return check_choice("status", v, GUEST_STATUSES)


class UpdateVMRequest(PartialUpdate):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"node"})

    server_id: int | None = None
    vmid: int | None = Field(default=None, ge=1)
    name: str | None = Field(default=None, min_length=1)
    type: str | None = None
    status: str | None = None
    cpu_usage: float | None = Field(default=None, ge=0, le=100)
    memory_usage: float | None = Field(default=None, ge=0, le=100)
    memory_total: float | None = Field(default=None, ge=0)
    uptime: int | None = Field(default=None, ge=0)
    node: str | None = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str | None) -> str | None:
        return check_choice("type", v, GUEST_TYPES)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str | None) -> str | None:
        return check_choice("status", v, GUEST_STATUSES)


class VMResponse(ApiModel):
    id: int
    server_id: int
    vmid: int
    name: str
    type: str
    status: str
    cpu_usage: float
    memory_usage: float
    memory_total: float
    uptime: int
    node: str | None
