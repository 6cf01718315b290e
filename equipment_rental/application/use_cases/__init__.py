"""Casos de uso del sistema de renta de equipo."""

from equipment_rental.application.use_cases.cancel_rental import CancelRentalUseCase
from equipment_rental.application.use_cases.cancel_reservation import CancelReservationUseCase
from equipment_rental.application.use_cases.confirm_reservation import ConfirmReservationUseCase
from equipment_rental.application.use_cases.create_rental import CreateRentalUseCase
from equipment_rental.application.use_cases.create_reservation import CreateReservationUseCase
from equipment_rental.application.use_cases.expire_reservations import ExpireReservationsUseCase
from equipment_rental.application.use_cases.extend_rental import ExtendRentalUseCase
from equipment_rental.application.use_cases.fulfill_reservation import FulfillReservationUseCase
from equipment_rental.application.use_cases.process_overdue_rentals import (
    ProcessOverdueRentalsUseCase,
)
from equipment_rental.application.use_cases.return_rental import ReturnRentalUseCase

__all__ = [
    # Rentals
    "CreateRentalUseCase",
    "ReturnRentalUseCase",
    "ExtendRentalUseCase",
    "CancelRentalUseCase",
    "ProcessOverdueRentalsUseCase",
    # Reservations
    "CreateReservationUseCase",
    "ConfirmReservationUseCase",
    "CancelReservationUseCase",
    "FulfillReservationUseCase",
    "ExpireReservationsUseCase",
]
