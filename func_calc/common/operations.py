"""Pydantic models for calculation requests and results."""
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class CalculationRequest(BaseModel):
    """Represents a single expression to calculate."""

    expression: str = Field(..., description="Expression as typed, spaces included")


class CalculationResult(BaseModel):
    """Represents the outcome of a calculation: either a value or an error message."""

    expression: str = Field(..., description="Original expression")
    result: Optional[float] = Field(default=None, description="Computed value, may be inf or nan")
    error: Optional[str] = Field(default=None, description="Parse error message")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "CalculationResult":
        """Ensure that a result carries either a value or an error, never both."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
