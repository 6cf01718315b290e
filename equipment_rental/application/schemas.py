from pydantic import AwareDatetime, BaseModel, Field, model_validator

from equipment_rental.domain.entities.equipment import EquipmentCondition


class RentalPeriodInput(BaseModel):
    start_date: AwareDatetime
    end_date: AwareDatetime

    @model_validator(mode="after")
    def _check_order(self) -> "RentalPeriodInput":
        if self.start_date >= self.end_date:
            raise ValueError("start_date must be before end_date")
        return self


class CreateRentalCommand(RentalPeriodInput):
    equipment_id: str = Field(..., min_length=1)
    member_id: str = Field(..., min_length=1)
    reservation_id: str | None = None


class ReturnRentalCommand(BaseModel):
    rental_id: str = Field(..., min_length=1)
    condition_at_return: EquipmentCondition
    assessed_by: str = "system"
    notes: str = ""


class ExtendRentalCommand(BaseModel):
    rental_id: str = Field(..., min_length=1)
    additional_days: int = Field(..., gt=0)


class CancelRentalCommand(BaseModel):
    rental_id: str = Field(..., min_length=1)


class CreateReservationCommand(RentalPeriodInput):
    equipment_id: str = Field(..., min_length=1)
    member_id: str = Field(..., min_length=1)


class ConfirmReservationCommand(BaseModel):
    reservation_id: str = Field(..., min_length=1)


class CancelReservationCommand(BaseModel):
    reservation_id: str = Field(..., min_length=1)
    reason: str | None = None


class FulfillReservationCommand(BaseModel):
    reservation_id: str = Field(..., min_length=1)


class BatchResult(BaseModel):
    processed: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)
