"""
Configuration layer for graphkit.

Configuration is:
- Explicit (a GraphConfig can be passed to every graph)
- Typed (frozen dataclasses)
- Layered (packaged defaults, overridden by GRAPHKIT_* environment variables)
"""

from graphkit.config.settings import (
    GraphConfig,
    LoggingConfig,
    GraphkitConfig,
)
from graphkit.config.loader import (
    load_config,
    get_config,
    configure_logging,
)

__all__ = [
    "GraphConfig",
    "LoggingConfig",
    "GraphkitConfig",
    "load_config",
    "get_config",
    "configure_logging",
]
