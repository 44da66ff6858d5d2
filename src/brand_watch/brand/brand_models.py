from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator


class DetectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    mentioned: bool
    position: Optional[int] = None  # index 1-based du premier segment qui matche
    method: Optional[str] = None    # "exact" | "loose" | "partial"

    @model_validator(mode="after")
    def _check_position(self) -> "DetectionResult":
        if self.mentioned and (self.position is None or self.position < 1):
            raise ValueError("position must be a positive integer when mentioned is true")
        if not self.mentioned and self.position is not None:
            raise ValueError("position must be None when mentioned is false")
        return self

    @classmethod
    def miss(cls) -> "DetectionResult":
        return cls(mentioned=False, position=None)

    @classmethod
    def hit(cls, position: int, method: str) -> "DetectionResult":
        return cls(mentioned=True, position=position, method=method)
