"""
Configuration layer for adtgraph.

Configuration is explicit and immutable: frozen dataclasses built either
directly or through load_config, which reads ADTGRAPH_* environment
variables via dynaconf. Graph equality always uses the default
RenderConfig, never the loaded one.
"""

from adtgraph.config.settings import (
    RenderConfig,
    LoggingConfig,
    AdtGraphConfig,
)
from adtgraph.config.loader import load_config, setup_logging

__all__ = [
    "RenderConfig",
    "LoggingConfig",
    "AdtGraphConfig",
    "load_config",
    "setup_logging",
]
