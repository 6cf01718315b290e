"""Excepciones de dominio para el sistema de renta de equipo."""

from typing import Any


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Representación serializable del error."""
        data: dict[str, Any] = {"code": self.code, "message": self.message}
        for key, value in vars(self).items():
            if key in ("message", "code") or key.startswith("_"):
                continue
            data[key] = value if isinstance(value, (int, float, bool)) or value is None else str(value)
        return data


# === Errores de construcción ===


class ValidationError(DomainError):
    """Error de validación de datos de entrada."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validación fallida en '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


class InvalidMoneyError(DomainError):
    """Monto monetario inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_MONEY")


class InvalidDateRangeError(DomainError):
    """Rango de fechas inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")


class InvalidIdentifierError(DomainError):
    """Identificador vacío o mal formado."""

    def __init__(self, kind: str):
        super().__init__(
            message=f"El identificador de {kind} no puede estar vacío",
            code="INVALID_IDENTIFIER",
        )
        self.kind = kind


# === Errores de transición de estado ===


class InvalidStateTransitionError(DomainError):
    """La operación no está permitida en el estado actual del agregado."""

    default_code = "INVALID_STATE_TRANSITION"

    def __init__(
        self,
        aggregate: str,
        aggregate_id: str,
        operation: str,
        current_status: str,
        reason: str,
    ):
        super().__init__(
            message=f"No se puede ejecutar '{operation}' sobre {aggregate} {aggregate_id} "
            f"en estado '{current_status}': {reason}",
            code=self.default_code,
        )
        self.aggregate = aggregate
        self.aggregate_id = aggregate_id
        self.operation = operation
        self.current_status = current_status
        self.reason = reason


class TemporalPreconditionError(InvalidStateTransitionError):
    """La ventana de fechas no permite la operación todavía (o ya no)."""

    default_code = "TEMPORAL_PRECONDITION_FAILED"


class EquipmentNotAvailableError(InvalidStateTransitionError):
    """El equipo no está disponible para renta."""

    default_code = "EQUIPMENT_NOT_AVAILABLE"

    def __init__(self, equipment_id: str, current_status: str, reason: str):
        super().__init__(
            aggregate="Equipment",
            aggregate_id=equipment_id,
            operation="rent",
            current_status=current_status,
            reason=reason,
        )
        self.equipment_id = equipment_id


class EquipmentAlreadyRentedError(EquipmentNotAvailableError):
    """El equipo ya tiene una renta en curso."""

    default_code = "EQUIPMENT_ALREADY_RENTED"

    def __init__(self, equipment_id: str, current_rental_id: str):
        super().__init__(
            equipment_id=equipment_id,
            current_status="rented",
            reason=f"ya está rentado (renta {current_rental_id})",
        )
        self.current_rental_id = current_rental_id


class EquipmentConditionUnacceptableError(EquipmentNotAvailableError):
    """La condición del equipo no permite rentarlo."""

    default_code = "EQUIPMENT_CONDITION_UNACCEPTABLE"

    def __init__(self, equipment_id: str, condition: str):
        super().__init__(
            equipment_id=equipment_id,
            current_status=condition,
            reason=f"la condición '{condition}' no permite rentarlo",
        )
        self.condition = condition


class InvalidRentalExtensionError(DomainError):
    """Extensión de renta inválida."""

    def __init__(self, rental_id: str, reason: str):
        super().__init__(
            message=f"Extensión inválida para la renta {rental_id}: {reason}",
            code="INVALID_RENTAL_EXTENSION",
        )
        self.rental_id = rental_id
        self.reason = reason


# === Errores de aplicación ===


class EquipmentNotFoundError(DomainError):
    """El equipo no existe."""

    def __init__(self, equipment_id: str):
        super().__init__(
            message=f"Equipo no encontrado: {equipment_id}",
            code="EQUIPMENT_NOT_FOUND",
        )
        self.equipment_id = equipment_id


class RentalNotFoundError(DomainError):
    """La renta no existe."""

    def __init__(self, rental_id: str):
        super().__init__(
            message=f"Renta no encontrada: {rental_id}",
            code="RENTAL_NOT_FOUND",
        )
        self.rental_id = rental_id


class ReservationNotFoundError(DomainError):
    """La reservación no existe."""

    def __init__(self, reservation_id: str):
        super().__init__(
            message=f"Reservación no encontrada: {reservation_id}",
            code="RESERVATION_NOT_FOUND",
        )
        self.reservation_id = reservation_id


class ReservationConflictError(DomainError):
    """Ya existe una reservación activa que se traslapa con el periodo."""

    def __init__(self, equipment_id: str, conflicting_ids: list[str]):
        super().__init__(
            message=f"El equipo {equipment_id} ya está reservado en un periodo traslapado: "
            f"{', '.join(conflicting_ids)}",
            code="RESERVATION_CONFLICT",
        )
        self.equipment_id = equipment_id
        self.conflicting_ids = conflicting_ids


# === Errores de miembros ===


class MemberNotFoundError(DomainError):
    """El miembro no existe."""

    def __init__(self, member_id: str):
        super().__init__(
            message=f"Miembro no encontrado: {member_id}",
            code="MEMBER_NOT_FOUND",
        )
        self.member_id = member_id


class MemberInactiveError(DomainError):
    """La cuenta del miembro está desactivada."""

    def __init__(self, member_id: str):
        super().__init__(
            message=f"La cuenta del miembro {member_id} está inactiva",
            code="MEMBER_INACTIVE",
        )
        self.member_id = member_id


class MemberHasOverdueRentalsError(DomainError):
    """El miembro tiene rentas vencidas sin devolver."""

    def __init__(self, member_id: str, overdue_count: int):
        super().__init__(
            message=f"El miembro {member_id} tiene {overdue_count} renta(s) vencida(s)",
            code="MEMBER_HAS_OVERDUE_RENTALS",
        )
        self.member_id = member_id
        self.overdue_count = overdue_count


class RentalLimitExceededError(DomainError):
    """El miembro alcanzó el máximo de rentas simultáneas de su nivel."""

    def __init__(self, member_id: str, current_rentals: int, max_allowed: int):
        super().__init__(
            message=f"El miembro {member_id} alcanzó su límite de rentas "
            f"({current_rentals}/{max_allowed})",
            code="RENTAL_LIMIT_EXCEEDED",
        )
        self.member_id = member_id
        self.current_rentals = current_rentals
        self.max_allowed = max_allowed


class RentalPeriodTooLongError(DomainError):
    """El periodo excede los días permitidos por el nivel del miembro."""

    def __init__(self, member_id: str, requested_days: int, max_days: int):
        super().__init__(
            message=f"El periodo de {requested_days} días excede el máximo de {max_days} "
            f"días del miembro {member_id}",
            code="RENTAL_PERIOD_TOO_LONG",
        )
        self.member_id = member_id
        self.requested_days = requested_days
        self.max_days = max_days
