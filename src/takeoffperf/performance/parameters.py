"""Derived takeoff parameters.

Converts raw inputs into the working quantities every later stage uses:
pressure altitude, ISA temperature, the reference temperatures, the runway
length left after lining up, and the credited headwind.
"""

from takeoffperf.performance import airframe
from takeoffperf.performance.data.atmosphere import T_MAX_TABLE, T_REF_TABLE
from takeoffperf.performance.data.wet import TVMCG_FACTORS
from takeoffperf.performance.types import (
    TakeoffConfiguration,
    TakeoffInputs,
    TakeoffParameters,
)

ISA_SEA_LEVEL_TEMP = 15.0
ISA_LAPSE_RATE = 0.0019812  # °C per ft
STANDARD_QNH = 1013.25

# Lowest headwind the T-VMCG factors are defined for
TVMCG_MIN_HEADWIND = -15.0


def calculate_isa_temp(elevation: float) -> float:
    """Get the ISA temperature (°C) at an elevation (ft)."""
    return ISA_SEA_LEVEL_TEMP - elevation * ISA_LAPSE_RATE


def calculate_pressure_altitude(elevation: float, qnh: float) -> float:
    """Get the pressure altitude (ft) of a field.

    Args:
        elevation: Field elevation (ft).
        qnh: Altimeter setting (hPa).

    Returns:
        Pressure altitude in feet.

    Examples:
        >>> calculate_pressure_altitude(0.0, 1013.25)
        0.0
    """
    return elevation + 145442.15 * (1 - (qnh / STANDARD_QNH) ** 0.190263)


def calculate_tref(elevation: float) -> float:
    return T_REF_TABLE.get(elevation)


def calculate_tmax(pressure_alt: float) -> float:
    return T_MAX_TABLE.get(pressure_alt)


def calculate_tflexmax(isa_temp: float) -> float:
    return isa_temp + airframe.T_MAX_FLEX_DISA


def calculate_parameters(inputs: TakeoffInputs) -> TakeoffParameters:
    """Derive the working parameters of a calculation.

    Args:
        inputs: Takeoff inputs.

    Returns:
        Fresh parameters; ``flex_limiting_factor`` is filled in later by
        the flex search.
    """
    isa_temp = calculate_isa_temp(inputs.elevation)
    pressure_alt = calculate_pressure_altitude(inputs.elevation, inputs.qnh)

    return TakeoffParameters(
        adjusted_tora=inputs.tora - airframe.LINEUP_DISTANCES.get(inputs.lineup_angle, 0.0),
        pressure_alt=pressure_alt,
        isa_temp=isa_temp,
        t_ref=calculate_tref(inputs.elevation),
        t_max=calculate_tmax(pressure_alt),
        t_flex_max=calculate_tflexmax(isa_temp),
        # Headwind credit is capped, tailwind is not
        headwind=min(airframe.MAX_HEADWIND, inputs.wind),
    )


def calculate_tvmcg(conf: TakeoffConfiguration, params: TakeoffParameters) -> float:
    """Get T-VMCG, the OAT above which a wet runway becomes VMCG limited.

    Args:
        conf: Takeoff configuration.
        params: Derived parameters.

    Returns:
        T-VMCG in °C.
    """
    slope, offset = TVMCG_FACTORS[conf].get(max(params.headwind, TVMCG_MIN_HEADWIND))
    return slope * (params.adjusted_tora - params.pressure_alt / 10) + offset
