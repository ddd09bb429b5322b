"""Result models for normalization and validation."""

from pydantic import BaseModel, Field
from typing import Optional


class NormalizedValue(BaseModel):
    """Formatter output tagged with whether the input was accepted."""
    original: str
    value: str
    ok: bool


class ValidationReport(BaseModel):
    """Snapshot of a validator's recorded errors."""
    value: Optional[str] = None
    field: Optional[str] = None
    errors: list[str] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors
