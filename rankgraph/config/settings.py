from functools import cached_property
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from rankgraph.config.groups import ObservabilityConfig, PageRankConfig


class Settings(BaseSettings):
    """
    RankGraph Application Settings

    Environment variables use the RANKGRAPH_ prefix.
    Example: RANKGRAPH_DAMPING=0.2, RANKGRAPH_LOG_FORMAT=json

    Grouped access:
        settings.pagerank       # PageRankConfig
        settings.observability  # ObservabilityConfig
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RANKGRAPH_",
        extra="ignore",
    )

    # ========================================================================
    # Grouped Config Accessors
    # ========================================================================

    @cached_property
    def pagerank(self) -> PageRankConfig:
        """PageRank iteration group."""
        return PageRankConfig(
            damping=self.damping,
            convergence_threshold=self.convergence_threshold,
            max_iterations=self.max_iterations,
        )

    @cached_property
    def observability(self) -> ObservabilityConfig:
        """Logging group."""
        return ObservabilityConfig(
            log_level=self.log_level,
            log_format=self.log_format,
            include_timestamp=self.log_include_timestamp,
            include_caller=self.log_include_caller,
        )

    # ========================================================================
    # PageRank
    # ========================================================================
    damping: float = 0.15
    convergence_threshold: float = 0.001  # CLI driver threshold
    max_iterations: int | None = None

    # ========================================================================
    # Logging
    # ========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["console", "json"] = "console"
    log_include_timestamp: bool = True
    log_include_caller: bool = False


# Eager loading (module-level instantiation)
settings = Settings()
