"""Fixed airframe and certification constants of the A380-842."""

from takeoffperf.performance.types import LineupAngle

STRUCTURAL_MTOW = 512_000.0
OPERATING_EMPTY_WEIGHT = 275_443.0
MAX_PRESSURE_ALT = 9_200.0

# Headwind credit ceiling and certified tailwind limit (kt)
MAX_HEADWIND = 45.0
MAX_TAILWIND = 15.0

MAX_RUNWAY_SLOPE = 2.0

# Tflexmax = ISA + this margin
T_MAX_FLEX_DISA = 59.0

MAX_TIRE_SPEED = 195.0

LINEUP_DISTANCES: dict[LineupAngle, float] = {
    LineupAngle.ZERO: 0.0,
    LineupAngle.NINETY: 20.5,
    LineupAngle.ONE_EIGHTY: 41.0,
}

# Weight deductions at the reference temperatures (kg)
WING_ANTI_ICE_BLEED_WEIGHT = 1_600.0
PACKS_BLEED_WEIGHT = 1_500.0

# Flex temperature deductions (°C)
ENGINE_ANTI_ICE_FLEX_PENALTY = 2.0
ENGINE_WING_ANTI_ICE_FLEX_PENALTY = 6.0
PACKS_FLEX_PENALTY = 2.0

# Beyond Tflexmax the flex search scans this many degrees to absorb bleed penalties
FLEX_EXTRAPOLATION_MARGIN = 8.0

# Largest V2 - V1 spread accepted from the table 2 V1 regression
MAX_TABLE2_V1_SPREAD = 8.0

# Forward CG VR correction only applies up to this MTOW
FORWARD_CG_SPEED_CORRECTION_MAX_MTOW = 473_114.0

# Tailwind assumed when re-evaluating speeds for a forced TOGA takeoff
FORCE_TOGA_TAILWIND = -15.0

# Stabilizer trim schedule: CG (%MAC) -> trim (degrees)
STAB_TRIM_CG_RANGE = (17.0, 40.0)
STAB_TRIM_RANGE = (3.8, -2.5)
