from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Graph core
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how edge payloads are interpreted by the graph core.
    """

    weight_key: str = "weight"
    default_weight: float = 1


# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingConfig:
    """
    Handler settings for applications embedding graphkit.

    The library itself only emits records; it never installs handlers.
    """

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s %(message)s"


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphkitConfig:
    """
    Root configuration object for graphkit.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
