"""
Configuration groups.

Each group is a standalone pydantic model, usable on its own and assembled
by Settings.
"""

from typing import Literal

from pydantic import BaseModel, Field


class PageRankConfig(BaseModel):
    """PageRank iteration settings."""

    damping: float = Field(default=0.15, ge=0.0, lt=1.0, description="Random-jump probability")
    convergence_threshold: float = Field(
        default=0.01, gt=0.0, description="Stop once a sweep's convergence metric drops below this"
    )
    max_iterations: int | None = Field(default=None, ge=1, description="Upper bound on sweeps (None = unbounded)")


class ObservabilityConfig(BaseModel):
    """Logging settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["console", "json"] = Field(default="console")
    include_timestamp: bool = Field(default=True, description="Attach ISO timestamps")
    include_caller: bool = Field(default=False, description="Attach file/line/function")
