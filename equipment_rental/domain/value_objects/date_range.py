"""Value Object DateRange - intervalo semiabierto [start, end)."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from equipment_rental.domain.errors import InvalidDateRangeError

ONE_DAY = timedelta(days=1)


def _ceil_days(delta: timedelta) -> int:
    """Días completos redondeados hacia arriba (25 horas = 2 días)."""
    return -((-delta) // ONE_DAY)


@dataclass(frozen=True)
class DateRange:
    """
    Value Object inmutable que representa un rango de fechas/horas.

    Incluye `start` y excluye `end`. Usado como periodo de rentas y
    reservaciones.

    Attributes:
        start: Fecha/hora de inicio.
        end: Fecha/hora de fin (exclusiva).
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise InvalidDateRangeError(
                "Rango de fechas inválido: el inicio debe ser anterior al fin "
                f"({self.start} >= {self.end})"
            )

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, other: "DateRange") -> bool:
        """Verifica si este rango se superpone con otro."""
        return self.start < other.end and self.end > other.start

    def contains(self, instant: datetime) -> bool:
        """Verifica si un instante cae dentro del rango (fin exclusivo)."""
        return self.start <= instant < self.end

    def day_count(self) -> int:
        """
        Calcula los días del rango.

        Regla de negocio: cualquier fracción de día cuenta como día completo.
        """
        return _ceil_days(self.duration)

    def days_until_end(self, instant: datetime) -> int:
        """Días desde `instant` hasta el fin; negativo si ya terminó."""
        return _ceil_days(self.end - instant)

    def days_past_end(self, instant: datetime) -> int:
        """Días de retraso respecto al fin del rango (0 si no ha terminado)."""
        if not self.has_ended(instant):
            return 0
        return _ceil_days(instant - self.end)

    def has_started(self, now: datetime) -> bool:
        return self.start <= now

    def has_ended(self, now: datetime) -> bool:
        return self.end <= now

    def is_active(self, now: datetime) -> bool:
        return self.has_started(now) and not self.has_ended(now)

    def extend(self, days: int) -> "DateRange":
        """Retorna un nuevo rango con el mismo inicio y el fin `days` días después."""
        if days <= 0:
            raise InvalidDateRangeError(f"Los días de extensión deben ser positivos: {days}")
        return DateRange(start=self.start, end=self.end + timedelta(days=days))

    def __str__(self) -> str:
        return f"{self.start.isoformat()} -> {self.end.isoformat()}"
