"""Fechas y periodos de prueba relativos a un instante fijo."""

from datetime import datetime, timedelta, timezone

from equipment_rental.domain.value_objects.date_range import DateRange

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def days_from_now(days: float) -> datetime:
    return NOW + timedelta(days=days)


def period(start_days: float, end_days: float) -> DateRange:
    """Periodo relativo a NOW, en días."""
    return DateRange(days_from_now(start_days), days_from_now(end_days))
