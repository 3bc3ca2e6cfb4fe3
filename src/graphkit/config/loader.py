from __future__ import annotations

from functools import lru_cache
import logging

from dynaconf import Dynaconf

from graphkit.config.constants import DEFAULTS
from graphkit.config.settings import GraphConfig, GraphkitConfig, LoggingConfig


def _settings() -> Dynaconf:
    settings = Dynaconf(
        envvar_prefix="GRAPHKIT",
        load_dotenv=True,
        settings_files=[],
    )
    for name, value in DEFAULTS.items():
        # Environment overrides win over packaged defaults.
        if settings.get(name) is None:
            settings.set(name, value)
    return settings


def load_config() -> GraphkitConfig:
    """
    Build a fresh configuration from defaults and GRAPHKIT_* variables.
    """
    settings = _settings()
    return GraphkitConfig(
        graph=GraphConfig(
            weight_key=settings.get("GRAPH_WEIGHT_KEY"),
            default_weight=settings.get("GRAPH_DEFAULT_WEIGHT"),
        ),
        logging=LoggingConfig(
            level=str(settings.get("LOG_LEVEL")).upper(),
            format=settings.get("LOG_FORMAT"),
        ),
    )


@lru_cache
def get_config() -> GraphkitConfig:
    return load_config()


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Install a root handler for the graphkit loggers.

    Intended for scripts and applications; library code never calls this.
    """
    if config is None:
        config = get_config().logging
    logging.basicConfig(level=config.level, format=config.format)
    logging.getLogger("graphkit").setLevel(config.level)
