"""Report models emitted by the demonstration driver."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class StepResult(BaseModel):
    """Outcome of one service call."""
    operation: str
    outcome: Literal["ok", "error"]
    error: str | None = Field(None, description="Error kind, e.g. BucketNotFound")
    message: str | None = None
    value: Any = None
    expected: str = Field("ok", description="Outcome or error kind the step should produce")

    @property
    def as_expected(self) -> bool:
        actual = self.outcome if self.outcome == "ok" else self.error
        return actual == self.expected


class DemoReport(BaseModel):
    steps: list[StepResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(step.as_expected for step in self.steps)


__all__ = ["StepResult", "DemoReport"]
