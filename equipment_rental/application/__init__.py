"""
Capa de Aplicación - Renta de Equipo.

Esta capa contiene los casos de uso, comandos e interfaces (puertos).
Orquesta las entidades del dominio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Casos de uso del sistema
- interfaces/: Puertos (contratos para adaptadores)
- schemas.py: Comandos Pydantic de entrada
"""

from equipment_rental.application.interfaces import (
    Clock,
    DamageAssessmentRepo,
    EquipmentRepo,
    EventPublisher,
    FakeClock,
    FakeIdGenerator,
    IdGenerator,
    RentalRepo,
    ReservationRepo,
    SystemClock,
    TransactionManager,
    UUIDIdGenerator,
)
from equipment_rental.application.schemas import (
    BatchResult,
    CancelRentalCommand,
    CancelReservationCommand,
    ConfirmReservationCommand,
    CreateRentalCommand,
    CreateReservationCommand,
    ExtendRentalCommand,
    FulfillReservationCommand,
    ReturnRentalCommand,
)

__all__ = [
    # Commands
    "CreateRentalCommand",
    "ReturnRentalCommand",
    "ExtendRentalCommand",
    "CancelRentalCommand",
    "CreateReservationCommand",
    "ConfirmReservationCommand",
    "CancelReservationCommand",
    "FulfillReservationCommand",
    "BatchResult",
    # Interfaces - Repositories
    "EquipmentRepo",
    "RentalRepo",
    "ReservationRepo",
    "DamageAssessmentRepo",
    # Interfaces - Events
    "EventPublisher",
    # Interfaces - Infrastructure
    "TransactionManager",
    # Interfaces - Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
    "IdGenerator",
    "UUIDIdGenerator",
    "FakeIdGenerator",
]
