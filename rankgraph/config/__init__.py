from rankgraph.config.groups import ObservabilityConfig, PageRankConfig
from rankgraph.config.settings import Settings, settings

__all__ = [
    # Settings
    "Settings",
    "settings",
    # Config Groups
    "PageRankConfig",
    "ObservabilityConfig",
]
