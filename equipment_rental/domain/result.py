"""Result - resultado explícito de una operación de dominio."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from equipment_rental.domain.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Resultado de una transición de dominio.

    Contiene el valor producido o el error de dominio que impidió la
    operación. El llamador decide si ramificar sobre `is_success` o
    propagar el error con `unwrap()`.
    """

    value: T | None = None
    error: DomainError | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Retorna el valor o lanza el error contenido."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: DomainError) -> "Result[T]":
        return cls(error=error)
