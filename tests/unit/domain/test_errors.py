from equipment_rental.domain.errors import (
    EquipmentAlreadyRentedError,
    EquipmentNotFoundError,
    InvalidStateTransitionError,
    MemberHasOverdueRentalsError,
    RentalLimitExceededError,
    ReservationConflictError,
    ValidationError,
)


def test_not_found_message():
    error = EquipmentNotFoundError("eq-1")

    assert error.message == "Equipo no encontrado: eq-1"
    assert str(error) == error.message
    assert error.to_dict() == {
        "code": "EQUIPMENT_NOT_FOUND",
        "message": "Equipo no encontrado: eq-1",
        "equipment_id": "eq-1",
    }


def test_validation_message_names_field():
    error = ValidationError("email", "correo electrónico inválido")

    assert error.message == "Validación fallida en 'email': correo electrónico inválido"
    assert error.code == "VALIDATION_ERROR"


def test_transition_message():
    error = InvalidStateTransitionError(
        aggregate="Rental",
        aggregate_id="r-1",
        operation="cancel",
        current_status="RETURNED",
        reason="solo las rentas activas pueden cancelarse",
    )

    assert error.message == (
        "No se puede ejecutar 'cancel' sobre Rental r-1 en estado 'RETURNED': "
        "solo las rentas activas pueden cancelarse"
    )
    assert error.to_dict()["current_status"] == "RETURNED"


def test_subclass_keeps_specific_code():
    error = EquipmentAlreadyRentedError("eq-1", "r-9")

    assert error.code == "EQUIPMENT_ALREADY_RENTED"
    assert "ya está rentado (renta r-9)" in error.message


def test_member_errors_serialize_counts():
    limit = RentalLimitExceededError("m-1", 2, 2).to_dict()
    overdue = MemberHasOverdueRentalsError("m-1", 3)

    assert limit["current_rentals"] == 2
    assert limit["message"] == "El miembro m-1 alcanzó su límite de rentas (2/2)"
    assert overdue.message == "El miembro m-1 tiene 3 renta(s) vencida(s)"


def test_conflict_lists_reservations():
    error = ReservationConflictError("eq-1", ["rs-1", "rs-2"])

    assert error.message.endswith("rs-1, rs-2")
    assert error.to_dict()["conflicting_ids"] == "['rs-1', 'rs-2']"
