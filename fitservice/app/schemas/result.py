from __future__ import annotations
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator

class FixedResultRequest(BaseModel):
    rows: List[Any] = Field(..., description="[[x, y], ...]; unparseable rows and rows with x <= 0 are dropped")

class ResultRequest(FixedResultRequest):
    # any truthy value; names that are not transforms are rejected by lookup
    transformKey: Any = Field(..., description="Transform name, e.g. 'square'")

    @field_validator("transformKey")
    @classmethod
    def key_present(cls, v):
        if not v:
            raise ValueError("transformKey is empty")
        return v

class ResultResponse(BaseModel):
    # None only for a non-finite transform output (JSON has no inf/nan)
    mainResult: Optional[float]

class ErrorResponse(BaseModel):
    error: str
