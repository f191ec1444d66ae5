from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

CheckStatus = Literal["success", "failed"]

LOSS_NONE = "0%"
LOSS_TOTAL = "100%"


def format_latency(elapsed_ms: float) -> str:
    return f"{elapsed_ms:.2f} ms"


@dataclass(frozen=True)
class CheckOutcome:
    status: CheckStatus
    loss: str
    latency: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.status == "success":
            if self.latency is None or self.error is not None:
                raise ValueError("success outcome needs latency and no error")
        elif self.status == "failed":
            if self.error is None or self.latency is not None:
                raise ValueError("failed outcome needs error and no latency")
        else:
            raise ValueError(f"Unknown status: {self.status}")

    @classmethod
    def succeeded(cls, elapsed_ms: float) -> "CheckOutcome":
        return cls(status="success", loss=LOSS_NONE, latency=format_latency(elapsed_ms))

    @classmethod
    def failed(cls, error: str) -> "CheckOutcome":
        return cls(status="failed", loss=LOSS_TOTAL, error=error)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"status": self.status, "loss": self.loss}
        if self.latency is not None:
            out["avg_time"] = self.latency
        if self.error is not None:
            out["error"] = self.error
        return out
