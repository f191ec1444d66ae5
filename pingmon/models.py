from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


class TargetList(BaseModel):
    targets: List[str] = Field(..., min_length=1)

    @field_validator("targets")
    @classmethod
    def _strip_and_reject_blank(cls, value: List[str]) -> List[str]:
        out = []
        for target in value:
            target = target.strip()
            if not target:
                raise ValueError("target must be a non-empty string")
            out.append(target)
        return out
