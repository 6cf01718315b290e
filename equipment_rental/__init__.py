"""Núcleo de dominio para renta de equipo: reservaciones, rentas y estado del equipo."""

__version__ = "0.1.0"
