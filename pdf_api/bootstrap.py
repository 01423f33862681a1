"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI

from pdf_api.api import create_api_application
from pdf_api.config import AppSettings, config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-validated settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    config_configure_logging(level=resolved_settings.log_level)
    application = create_api_application(settings=resolved_settings)
    logger.info(
        "Assembled %s %s (environment=%s)",
        resolved_settings.service_name,
        resolved_settings.service_version,
        resolved_settings.environment_name,
    )
    return application
