"""Pydantic schemas for the server domain."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, field_validator

from proxmon.schemas.base import ApiModel, PartialUpdate, check_choice

SERVER_STATUSES = frozenset({"online", "warning", "offline", "maintenance"})


class CreateServerRequest(ApiModel):
    name: str = Field(min_length=1)
    host: str = Field(min_length=1)
    port: int = Field(default=8006, ge=1, le=65535)
    username: str = Field(min_length=1)
    status: str
    cpu_usage: float = Field(default=0.0, ge=0, le=100)
    memory_usage: float = Field(default=0.0, ge=0, le=100)
    memory_total: float = Field(default=0.0, ge=0)
    uptime: int = Field(default=0, ge=0)
    vm_count: int = Field(default=0, ge=0)
    lxc_count: int = Field(default=0, ge=0)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        return check_choice("status", v, SERVER_STATUSES)


class UpdateServerRequest(PartialUpdate):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"last_seen"})

    name: str | None = Field(default=None, min_length=1)
    host: str | None = Field(default=None, min_length=1)
    port: int | None = Field(default=None, ge=1, le=65535)
    username: str | None = Field(default=None, min_length=1)
    status: str | None = None
    cpu_usage: float | None = Field(default=None, ge=0, le=100)
    memory_usage: float | None = Field(default=None, ge=0, le=100)
    memory_total: float | None = Field(default=None, ge=0)
    uptime: int | None = Field(default=None, ge=0)
    vm_count: int | None = Field(default=None, ge=0)
    lxc_count: int | None = Field(default=None, ge=0)
    last_seen: datetime | None = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str | None) -> str | None:
        return check_choice("status", v, SERVER_STATUSES)


class ServerResponse(ApiModel):
    id: int
    name: str
    host: str
    port: int
    username: str
    status: str
    cpu_usage: float
    memory_usage: float
    memory_total: float
    uptime: int
    vm_count: int
    lxc_count: int
    last_seen: datetime | None
