"""Logging setup driven by Settings."""

import logging
from typing import Optional

from .settings import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured level and format to the root logger."""
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        format=settings.log_format,
        level=settings.log_level,
        force=True,
    )

    logging.getLogger(__name__).debug(
        "Logging configured",
        extra={"app_name": settings.app_name, "log_level": settings.log_level},
    )
