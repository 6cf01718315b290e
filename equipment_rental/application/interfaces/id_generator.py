"""Interface IdGenerator - Puerto para generación de identificadores únicos."""

import uuid
from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """
    Puerto para generación de identificadores únicos.

    Las factories del dominio reciben `generate_uuid` como callable, de modo
    que el dominio nunca genera UUIDs por su cuenta.
    """

    @abstractmethod
    def generate_uuid(self) -> str:
        """
        Genera un identificador único.

        Returns:
            String con UUID en formato estándar (xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx).
        """
        raise NotImplementedError


class UUIDIdGenerator(IdGenerator):
    """Implementación real que genera UUIDs aleatorios."""

    def generate_uuid(self) -> str:
        return str(uuid.uuid4())


class FakeIdGenerator(IdGenerator):
    """
    Implementación fake para testing.

    Genera valores predecibles para pruebas deterministas.
    """

    def __init__(self) -> None:
        self._counter = 0

    def generate_uuid(self) -> str:
        """Genera un UUID predecible basado en contador."""
        self._counter += 1
        hex_value = f"{self._counter:032x}"
        return f"{hex_value[:8]}-{hex_value[8:12]}-{hex_value[12:16]}-{hex_value[16:20]}-{hex_value[20:]}"

    @property
    def generated_count(self) -> int:
        return self._counter

    def reset(self) -> None:
        self._counter = 0
