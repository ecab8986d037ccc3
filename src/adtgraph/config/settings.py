from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Canonical rendering
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class RenderConfig:
    """
    Tokens used when rendering a graph as text.

    The defaults produce the canonical form that graph equality is
    based on. Note the separator is " ," rather than ", ".
    """

    first_prefix: str = " "
    separator: str = " ,"
    vertex_suffix: str = ":"
    line_terminator: str = "\n"


# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class LoggingConfig:
    """
    Applied by setup_logging; the library itself never installs handlers.
    """

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s %(message)s"


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class AdtGraphConfig:
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
