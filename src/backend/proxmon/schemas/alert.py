"""Pydantic schemas for alerts."""

from datetime import datetime

from pydantic import Field, field_validator

from proxmon.schemas.base import ApiModel, check_choice

ALERT_TYPES = frozenset({"warning", "critical", "info"})


class CreateAlertRequest(ApiModel):
    server_id: int | None = None
    vm_id: int | None = None
    type: str
    message: str = Field(min_length=1)
    acknowledged: bool = False

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        return check_choice("type", v, ALERT_TYPES)


class AlertResponse(ApiModel):
    id: int
    server_id: int | None
    vm_id: int | None
    type: str
    message: str
    timestamp: datetime | None
    acknowledged: bool
