"""Pydantic schemas for storage usage."""

from pydantic import Field

from proxmon.schemas.base import ApiModel


class StorageEntry(ApiModel):
    storage: str = Field(min_length=1)
    used: float = Field(ge=0)
    total: float = Field(ge=0)
    type: str = Field(min_length=1)


class StorageResponse(StorageEntry):
    id: int
    server_id: int
