"""Identificadores tipados por agregado."""

from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, TypeVar

from equipment_rental.domain.errors import InvalidIdentifierError


class EquipmentKind:
    label: ClassVar[str] = "Equipment"


class RentalKind:
    label: ClassVar[str] = "Rental"


class MemberKind:
    label: ClassVar[str] = "Member"


class ReservationKind:
    label: ClassVar[str] = "Reservation"


class DamageAssessmentKind:
    label: ClassVar[str] = "DamageAssessment"


K = TypeVar("K")

IdFactory = Callable[[], str]


@dataclass(frozen=True)
class Identifier(Generic[K]):
    """
    Value Object opaco que identifica un agregado.

    El tipo `kind` actúa como marca: un `EquipmentId` nunca es igual a un
    `RentalId` aunque compartan el mismo valor.

    Attributes:
        kind: Clase marcadora del tipo de agregado.
        value: Valor opaco (usualmente un UUID).
    """

    kind: type[K]
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidIdentifierError(getattr(self.kind, "label", str(self.kind)))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls, kind: type[K], generate_id: IdFactory) -> "Identifier[K]":
        """Crea un identificador nuevo usando el generador inyectado."""
        return cls(kind=kind, value=generate_id())


EquipmentId = Identifier[EquipmentKind]
RentalId = Identifier[RentalKind]
MemberId = Identifier[MemberKind]
ReservationId = Identifier[ReservationKind]
DamageAssessmentId = Identifier[DamageAssessmentKind]


def equipment_id(value: str) -> EquipmentId:
    return Identifier(kind=EquipmentKind, value=value)


def rental_id(value: str) -> RentalId:
    return Identifier(kind=RentalKind, value=value)


def member_id(value: str) -> MemberId:
    return Identifier(kind=MemberKind, value=value)


def reservation_id(value: str) -> ReservationId:
    return Identifier(kind=ReservationKind, value=value)


def damage_assessment_id(value: str) -> DamageAssessmentId:
    return Identifier(kind=DamageAssessmentKind, value=value)
