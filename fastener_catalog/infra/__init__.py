"""Infrastructure - logging and local file storage.

Storage is imported from ``fastener_catalog.infra.storage`` directly; it
depends on the core package, which itself logs through this package.
"""

from fastener_catalog.infra.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
