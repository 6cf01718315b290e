"""Value Object Money - monto monetario exacto en centavos."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from equipment_rental.domain.errors import InvalidMoneyError

CENTS_PER_UNIT = 100
# Tolerancia para ruido de punto flotante, en centavos
_FLOAT_NOISE_CENTS = Decimal("0.000001")


@dataclass(frozen=True, order=True)
class Money:
    """
    Value Object inmutable que representa un monto no negativo.

    Se almacena como entero de centavos para evitar errores de punto
    flotante; `amount` expone la vista decimal para mostrar.

    Attributes:
        cents: Monto en la unidad menor (centavos).
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise InvalidMoneyError(f"cents debe ser entero: {self.cents!r}")
        if self.cents < 0:
            raise InvalidMoneyError(f"El monto no puede ser negativo: {self.cents} centavos")

    @property
    def amount(self) -> Decimal:
        """Retorna el monto como Decimal con 2 decimales."""
        return (Decimal(self.cents) / CENTS_PER_UNIT).quantize(Decimal("0.01"))

    def add(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError(f"No se puede sumar Money con {type(other)}")
        return Money(self.cents + other.cents)

    def subtract(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError(f"No se puede restar Money con {type(other)}")
        if other.cents > self.cents:
            raise InvalidMoneyError(
                f"La resta produciría un monto negativo: {self} - {other}"
            )
        return Money(self.cents - other.cents)

    def multiply(self, factor: int | float | Decimal) -> "Money":
        """Multiplica redondeando al centavo más cercano (half-up)."""
        if isinstance(factor, bool) or not isinstance(factor, (int, float, Decimal)):
            raise TypeError(f"No se puede multiplicar Money por {type(factor)}")
        exact = Decimal(self.cents) * Decimal(str(factor))
        if exact < 0:
            raise InvalidMoneyError(f"Multiplicar por {factor} produciría un monto negativo")
        return Money(int(exact.quantize(Decimal("1"), rounding=ROUND_HALF_UP)))

    def is_zero(self) -> bool:
        return self.cents == 0

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __mul__(self, factor: int | float | Decimal) -> "Money":
        return self.multiply(factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @classmethod
    def zero(cls) -> "Money":
        """Crea un Money con valor cero."""
        return cls(0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        return cls(cents)

    @classmethod
    def from_decimal(cls, amount: Decimal | int | float | str) -> "Money":
        """
        Crea un Money desde un monto decimal (ej: "175.00", 17.5).

        Raises:
            InvalidMoneyError: si el monto es negativo o tiene precisión
                menor a un centavo más allá del ruido de punto flotante.
        """
        try:
            value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidMoneyError(f"Monto inválido: {amount!r}") from exc
        if not value.is_finite():
            raise InvalidMoneyError(f"Monto inválido: {amount!r}")
        if value < 0:
            raise InvalidMoneyError(f"El monto no puede ser negativo: {amount}")

        cents = value * CENTS_PER_UNIT
        rounded = cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        if abs(cents - rounded) > _FLOAT_NOISE_CENTS:
            raise InvalidMoneyError(f"El monto admite a lo sumo 2 decimales: {amount}")
        return cls(int(rounded))

    @classmethod
    def dollars(cls, amount: Decimal | int | float | str) -> "Money":
        """Alias de `from_decimal` para montos en la unidad mayor."""
        return cls.from_decimal(amount)
