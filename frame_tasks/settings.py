"""
Configuration models for the frame task scheduler.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RunnerSettings(BaseModel):
    """Fixed-step settings for driving a task tree without a host frame loop."""
    model_config = ConfigDict(frozen=True)

    step_delta: float = Field(1 / 60, gt=0, description="Delta passed to every update call.")
    max_steps: Optional[int] = Field(10_000, ge=1, description="Step limit for run(); None means no limit.")
    raise_on_step_limit: bool = Field(True, description="Raise StepLimitExceededError instead of returning when the limit is hit.")
