"""Engine tunables.

No environment lookups, no I/O. Pure configuration data shared by the
series engine, the Newton refiner and the constant cache.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_DOWN
from typing import final


@final
@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Fixed precision-budget policy of the numerical engine."""

    constants_precision: int        # base tier for pi, e, log 2/3/10
    constants_rounding: str         # decimal.ROUND_* used while building constants
    newton_guard_digits: int        # refiner cap = target precision + this
    newton_seed_precision: int      # digits trusted in a float seed
    newton_growth_factor: int       # working precision multiplier per step
    fraction_min_precision: int     # floor for unscaled ExactFraction.to_decimal()

    def __post_init__(self) -> None:
        if self.constants_precision <= 0:
            raise TypeError(f"constants_precision must be > 0, got {self.constants_precision}")
        if self.newton_growth_factor < 2:
            raise TypeError(f"newton_growth_factor must be >= 2, got {self.newton_growth_factor}")
        if self.newton_seed_precision <= 0:
            raise TypeError(
                f"newton_seed_precision must be > 0, got {self.newton_seed_precision}"
            )


DEFAULT_ENGINE_CONFIG = EngineConfig(
    constants_precision=255,
    constants_rounding=ROUND_HALF_DOWN,
    newton_guard_digits=20,
    newton_seed_precision=15,
    newton_growth_factor=3,
    fraction_min_precision=128,
)
