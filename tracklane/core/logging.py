"""Logging configuration.

A single ``logger`` is shared across the package. It is a
``ContextualLogger``: a ``LoggerAdapter`` that carries key/value
dimensions and renders them after the message, so call sites can bind
context once and reuse the bound logger:

    from tracklane.core.logging import logger

    log = logger.with_context(provider="mixpanel")
    log.info("Tracking event: %s", name)

Importing the package sets the level of the ``tracklane`` logger but adds
no handler; records propagate to whatever the host configured. Scripts
without their own logging setup call ``LoggerConfigurator.add_console_handler()``.
"""

import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

from tracklane.core.config.settings import LoggingSettings

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that attaches dimensions to every record."""

    def __init__(self, logger: logging.Logger, dimensions: Optional[Dict[str, Any]] = None):
        """Wrap ``logger`` with a fixed set of dimensions."""
        super().__init__(logger, {})
        self.dimensions: Dict[str, Any] = dict(dimensions or {})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        """Merge dimensions into ``extra`` and append them to the message."""
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.dimensions)
        kwargs["extra"] = extra
        if self.dimensions:
            rendered = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
            msg = f"{msg} [{rendered}]"
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with ``dimensions`` added to the current ones."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions})


class LoggerConfigurator:
    """Builds package loggers with a consistent level and optional console output."""

    @staticmethod
    def configure_logger(
        name: str, dimensions: Optional[Dict[str, Any]] = None
    ) -> ContextualLogger:
        """Configure and return a ContextualLogger for ``name``.

        Args:
            name: Logger name, usually ``__name__``.
            dimensions: Initial context attached to every record.

        Returns:
            The configured ContextualLogger.
        """
        base = logging.getLogger(name)
        base.setLevel(_logging_settings.LOG_LEVEL.upper())
        return ContextualLogger(base, dimensions)

    @staticmethod
    def add_console_handler(name: str = "tracklane") -> logging.Logger:
        """Attach a stdout handler to ``name`` once and stop propagation.

        Propagation is switched off so records are not printed again by
        handlers the host attached to the root logger.
        """
        base = logging.getLogger(name)
        if not any(getattr(h, "_tracklane_console", False) for h in base.handlers):
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            handler._tracklane_console = True
            base.addHandler(handler)
        base.propagate = False
        return base


_logging_settings = LoggingSettings()

logger = LoggerConfigurator.configure_logger(
    "tracklane", dimensions={"environment": _logging_settings.ENVIRONMENT.value}
)
