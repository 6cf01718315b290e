"""Constantes de política del dominio de renta."""

# Montos en centavos
DEFAULT_DAILY_LATE_FEE_CENTS = 1_000
DAMAGE_FEE_PER_LEVEL_CENTS = 5_000

# Niveles de degradación tolerados como desgaste normal
ACCEPTABLE_WEAR_LEVELS = 1

MAINTENANCE_INTERVAL_DAYS = 90

# Tarifa de reparación estimada por niveles de degradación (DamageAssessment)
REPAIR_COST_TIERS_CENTS = {
    1: 5_000,
    2: 15_000,
    3: 30_000,
}
MAX_REPAIR_COST_CENTS = 50_000
