from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Health status")


class ConfigResponse(BaseModel):
    targets: list[str]
    interval_s: float = Field(gt=0)
    timeout_s: float = Field(gt=0)
    port: int = Field(ge=1, le=65535)


class PingResultResponse(BaseModel):
    status: Literal["success", "failed"]
    loss: Literal["0%", "100%"]
    avg_time: str | None = Field(
        default=None, description="Elapsed time, e.g. '123.45 ms'. Omitted on failure."
    )
    error: str | None = Field(default=None, description="Failure cause. Omitted on success.")
