"""Logging setup for Bastion.

Everything logs through a ``ContextualLogger``: a ``LoggerAdapter`` that carries
identity dimensions (component, user_id, resource kind, ...) and an optional
message prefix.

Usage:
    from bastion.core.logging import logger

    registry_logger = logger.with_prefix("PolicyRegistry: ").with_context(
        component="policy_registry"
    )
    registry_logger.info("Built registry")
"""

import logging
import sys
from typing import Any, Mapping, MutableMapping, Optional

from bastion.core.config import Environment, settings

_LOGGER_NAME = "bastion"


class _DimensionFormatter(logging.Formatter):
    """Appends the logger dimensions to each line as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        dimensions = getattr(record, "dimensions", None)
        if dimensions:
            rendered = " ".join(f"{key}={value}" for key, value in sorted(dimensions.items()))
            line = f"{line} [{rendered}]"
        return line


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter with immutable context dimensions.

    ``with_context`` and ``with_prefix`` return new adapters; the receiver is
    never changed, so a logger can be shared across requests.
    """

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[Mapping[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap ``logger`` with the given dimensions and message prefix."""
        self.dimensions: dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix
        super().__init__(logger, self.dimensions)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping]:
        """Attach dimensions to the record and apply the prefix."""
        extra = dict(kwargs.get("extra") or {})
        extra["dimensions"] = {**self.dimensions, **extra.pop("dimensions", {})}
        kwargs["extra"] = extra
        if self.prefix:
            msg = f"{self.prefix}{msg}"
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a logger with extra dimensions. ``None`` values are dropped."""
        merged = {**self.dimensions}
        merged.update({key: value for key, value in dimensions.items() if value is not None})
        return ContextualLogger(self.logger, merged, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a logger that prefixes every message with ``prefix``."""
        return ContextualLogger(self.logger, self.dimensions, prefix)


def _configure_base_logger() -> logging.Logger:
    base = logging.getLogger(_LOGGER_NAME)
    base.setLevel(settings.LOG_LEVEL)
    if not base.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if settings.ENVIRONMENT == Environment.LOCAL:
            fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
        else:
            fmt = "%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"
        handler.setFormatter(_DimensionFormatter(fmt))
        base.addHandler(handler)
    return base


logger = ContextualLogger(_configure_base_logger())
