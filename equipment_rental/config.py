from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from equipment_rental.domain.constants import (
    DAMAGE_FEE_PER_LEVEL_CENTS,
    DEFAULT_DAILY_LATE_FEE_CENTS,
    MAINTENANCE_INTERVAL_DAYS,
)
from equipment_rental.domain.value_objects.money import Money


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RENTAL_", env_file=".env", extra="ignore")

    # Montos en dólares, con centavos como máxima precisión
    daily_late_fee: Decimal = Field(
        default=Decimal(DEFAULT_DAILY_LATE_FEE_CENTS) / 100, ge=0, decimal_places=2
    )
    damage_fee_per_level: Decimal = Field(
        default=Decimal(DAMAGE_FEE_PER_LEVEL_CENTS) / 100, ge=0, decimal_places=2
    )
    maintenance_interval_days: int = Field(default=MAINTENANCE_INTERVAL_DAYS, gt=0)

    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def daily_late_fee_rate(self) -> Money:
        return Money.from_decimal(self.daily_late_fee)

    @property
    def damage_fee_per_level_rate(self) -> Money:
        return Money.from_decimal(self.damage_fee_per_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
