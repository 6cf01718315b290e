"""Configuración de logging de la aplicación."""

import logging

from equipment_rental.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configura el logging raíz con el nivel y formato de la configuración."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
        force=True,
    )
