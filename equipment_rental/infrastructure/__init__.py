"""Capa de infraestructura: adaptadores de los puertos y configuración de logging."""
