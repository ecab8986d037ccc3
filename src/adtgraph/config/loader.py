from __future__ import annotations

import logging
from typing import Optional

from dynaconf import Dynaconf

from adtgraph.config.constants import DEFAULTS
from adtgraph.config.settings import AdtGraphConfig, LoggingConfig, RenderConfig


def _settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="ADTGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def load_config(settings: Optional[Dynaconf] = None) -> AdtGraphConfig:
    """
    Build an AdtGraphConfig from defaults and ADTGRAPH_* environment variables.
    """
    if settings is None:
        settings = _settings()

    config = AdtGraphConfig(
        render=RenderConfig(
            first_prefix=settings.get("RENDER_FIRST_PREFIX", DEFAULTS["RENDER_FIRST_PREFIX"]),
            separator=settings.get("RENDER_SEPARATOR", DEFAULTS["RENDER_SEPARATOR"]),
            vertex_suffix=settings.get("RENDER_VERTEX_SUFFIX", DEFAULTS["RENDER_VERTEX_SUFFIX"]),
            line_terminator=settings.get(
                "RENDER_LINE_TERMINATOR",
                DEFAULTS["RENDER_LINE_TERMINATOR"],
            ),
        ),
        logging=LoggingConfig(
            level=str(settings.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"])).upper(),
            format=settings.get("LOG_FORMAT", DEFAULTS["LOG_FORMAT"]),
        ),
    )
    logging.getLogger("adtgraph.config").info(
        "loaded config separator=%r log_level=%s",
        config.render.separator,
        config.logging.level,
    )
    return config


def setup_logging(config: LoggingConfig) -> None:
    logging.basicConfig(
        level=config.level,
        format=config.format,
    )
