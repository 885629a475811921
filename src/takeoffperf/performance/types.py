"""Enumerations and records shared by the takeoff performance engine.

All weights are kilograms, speeds knots, temperatures degrees Celsius,
lengths metres, altitudes feet and winds knots (positive = headwind).
"""

import copy
import math
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from takeoffperf.core.config import ConfigError

T = TypeVar("T")


class PerformanceCalculationError(Exception):
    """Raised when the engine is driven out of sequence or with impossible state."""


class TakeoffConfiguration(Enum):
    """High-lift configuration selectable for takeoff."""

    CONF_1 = 1  # 1+F
    CONF_2 = 2
    CONF_3 = 3


class LineupAngle(Enum):
    """Runway entry angle, which costs runway length while lining up."""

    ZERO = 0
    NINETY = 90
    ONE_EIGHTY = 180


class AntiIceSetting(Enum):
    """Anti-ice bleed selection."""

    OFF = "off"
    ENGINE = "engine"
    ENGINE_WING = "engine_wing"


class RunwayCondition(Enum):
    """Runway surface state."""

    DRY = "dry"
    WET = "wet"
    WATER_6MM = "water_6mm"
    WATER_13MM = "water_13mm"
    SLUSH_6MM = "slush_6mm"
    SLUSH_13MM = "slush_13mm"
    COMPACTED_SNOW = "compacted_snow"
    WET_SNOW_5MM = "wet_snow_5mm"
    WET_SNOW_15MM = "wet_snow_15mm"
    WET_SNOW_30MM = "wet_snow_30mm"
    DRY_SNOW_10MM = "dry_snow_10mm"
    DRY_SNOW_100MM = "dry_snow_100mm"

    @property
    def is_contaminated(self) -> bool:
        """Whether the condition is one of the contamination states."""
        return self not in (RunwayCondition.DRY, RunwayCondition.WET)


class LimitingFactor(Enum):
    """Phenomenon limiting the takeoff weight, in evaluation order."""

    RUNWAY = "runway"
    SECOND_SEGMENT = "second_segment"
    BRAKE_ENERGY = "brake_energy"
    VMCG = "vmcg"


class ReferenceTemperature(Enum):
    """Temperatures at which weight ceilings are evaluated."""

    OAT = "oat"
    TREF = "tref"
    TMAX = "tmax"
    TFLEXMAX = "tflexmax"


class TvmcgRegime(Enum):
    """Wet-runway coefficient family, chosen by OAT against T-VMCG."""

    AT_OR_BELOW = "at_or_below"
    ABOVE = "above"

    @classmethod
    def for_temperature(cls, oat: float, tvmcg: float) -> "TvmcgRegime":
        return cls.ABOVE if oat > tvmcg else cls.AT_OR_BELOW


class RegressionTable(Enum):
    """Coefficient table of the second-segment/brake-energy speed regression."""

    TABLE_1 = 1
    TABLE_2 = 2


class TakeoffPerformanceError(Enum):
    """Outcome of a calculation. ``NONE`` means success."""

    NONE = "none"
    INVALID_DATA = "invalid_data"
    STRUCTURAL_MTOW = "structural_mtow"
    MAXIMUM_PRESSURE_ALT = "maximum_pressure_alt"
    MAXIMUM_TEMPERATURE = "maximum_temperature"
    OPERATING_EMPTY_WEIGHT = "operating_empty_weight"
    CG_OUT_OF_LIMITS = "cg_out_of_limits"
    MAXIMUM_TAILWIND = "maximum_tailwind"
    MAXIMUM_RUNWAY_SLOPE = "maximum_runway_slope"
    TOO_LIGHT = "too_light"
    TOO_HEAVY = "too_heavy"
    VMCG_VMCA_LIMITS = "vmcg_vmca_limits"
    MAXIMUM_TIRE_SPEED = "maximum_tire_speed"


@dataclass(frozen=True)
class PerConfiguration(Generic[T]):
    """One entry per takeoff configuration.

    Examples:
        >>> slope = PerConfiguration(conf1=0.00084, conf2=0.00096, conf3=0.0011)
        >>> slope[TakeoffConfiguration.CONF_2]
        0.00096
    """

    conf1: T
    conf2: T
    conf3: T

    def __getitem__(self, conf: TakeoffConfiguration) -> T:
        if conf is TakeoffConfiguration.CONF_1:
            return self.conf1
        if conf is TakeoffConfiguration.CONF_2:
            return self.conf2
        if conf is TakeoffConfiguration.CONF_3:
            return self.conf3
        raise PerformanceCalculationError(f"Not a takeoff configuration: {conf!r}")


def _parse_enum(enum_type: type[Enum], value: Any, field_name: str) -> Enum:
    if isinstance(value, enum_type):
        return value
    # YAML 1.1 reads a bare off/on as a bool
    if isinstance(value, bool):
        value = "on" if value else "off"
    for member in enum_type:
        if value == member.value or (isinstance(value, str) and value.upper() == member.name):
            return member
    raise ConfigError(f"Invalid {field_name}: {value!r}")


@dataclass(frozen=True)
class TakeoffInputs:
    """Immutable description of one takeoff.

    ``conf`` stays an integer so that an invalid selector reaches the
    validator instead of failing on construction.

    Attributes:
        tow: Takeoff weight (kg).
        forward_cg: Whether the CG is in the forward range.
        conf: Takeoff configuration number (1, 2 or 3).
        tora: Take-off run available (m).
        slope: Runway slope (%, positive uphill).
        lineup_angle: Runway entry angle.
        wind: Wind component (kt, positive headwind).
        elevation: Field elevation (ft).
        qnh: Altimeter setting (hPa).
        oat: Outside air temperature (°C).
        anti_ice: Anti-ice bleed selection.
        packs: Whether air conditioning packs are on.
        force_toga: Whether maximum thrust is forced.
        runway_condition: Runway surface state.
        cg: Optional centre of gravity (%MAC).
    """

    tow: float
    forward_cg: bool
    conf: int
    tora: float
    slope: float
    lineup_angle: LineupAngle
    wind: float
    elevation: float
    qnh: float
    oat: float
    anti_ice: AntiIceSetting
    packs: bool
    force_toga: bool
    runway_condition: RunwayCondition
    cg: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TakeoffInputs":
        """Build inputs from a plain mapping such as a YAML ``takeoff:`` section.

        Enum fields accept either the member name or its value, e.g.
        ``runway_condition: wet`` or ``lineup_angle: 90``. ``forward_cg``,
        ``slope``, ``lineup_angle``, ``wind``, ``anti_ice``, ``packs``,
        ``force_toga``, ``runway_condition`` and ``cg`` are optional.

        Args:
            data: Mapping of field names to values.

        Returns:
            Parsed inputs.

        Raises:
            ConfigError: If keys are unknown or missing, or values malformed.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown takeoff input(s): {', '.join(unknown)}")

        required = ("tow", "conf", "tora", "elevation", "qnh", "oat")
        missing = [name for name in required if data.get(name) is None]
        if missing:
            raise ConfigError(f"Missing takeoff input(s): {', '.join(missing)}")

        try:
            cg = data.get("cg")
            return cls(
                tow=float(data["tow"]),
                forward_cg=bool(data.get("forward_cg", False)),
                conf=int(data["conf"]),
                tora=float(data["tora"]),
                slope=float(data.get("slope", 0.0)),
                lineup_angle=_parse_enum(LineupAngle, data.get("lineup_angle", 0), "lineup_angle"),
                wind=float(data.get("wind", 0.0)),
                elevation=float(data["elevation"]),
                qnh=float(data["qnh"]),
                oat=float(data["oat"]),
                anti_ice=_parse_enum(AntiIceSetting, data.get("anti_ice", "off"), "anti_ice"),
                packs=bool(data.get("packs", False)),
                force_toga=bool(data.get("force_toga", False)),
                runway_condition=_parse_enum(
                    RunwayCondition, data.get("runway_condition", "dry"), "runway_condition"
                ),
                cg=None if cg is None else float(cg),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid takeoff input: {e}") from e


@dataclass
class TakeoffParameters:
    """Working parameters derived from the inputs."""

    adjusted_tora: float
    pressure_alt: float
    isa_temp: float
    t_ref: float
    t_max: float
    t_flex_max: float
    headwind: float
    flex_limiting_factor: LimitingFactor | None = None


@dataclass
class TemperatureLimit:
    """Weight ceiling of one limiting factor at one reference temperature.

    Attributes:
        delta_temp: Weight lost to temperature (kg).
        delta_wind: Weight lost to wind (kg, negative when wind helps).
        limit_no_bleed: Ceiling before the bleed deduction (kg).
        limit: Ceiling after the bleed deduction (kg).
    """

    delta_temp: float
    delta_wind: float
    limit_no_bleed: float
    limit: float


@dataclass
class LimitWeight:
    """Chain of weight ceilings for one limiting factor."""

    base_limit: float
    delta_slope: float
    slope_limit: float
    delta_alt: float
    alt_limit: float
    temperatures: dict[ReferenceTemperature, TemperatureLimit] = field(default_factory=dict)

    def at(self, reference: ReferenceTemperature) -> TemperatureLimit:
        try:
            return self.temperatures[reference]
        except KeyError:
            raise PerformanceCalculationError(
                f"Weight limit at {reference.value} has not been evaluated"
            ) from None


@dataclass
class TakeoffSpeeds:
    """Intermediate terms of the V-speed regression.

    Wind and table-selection fields stay None on branches that do not use
    them. ``dry_*`` keep the reconciled dry speeds before wet correction.
    """

    v1_base: float | None = None
    v1_delta_runway: float | None = None
    v1_delta_alt: float | None = None
    v1_delta_slope: float | None = None
    v1_delta_wind: float | None = None
    v1_table2: float | None = None
    v1: float | None = None
    vr_base: float | None = None
    vr_delta_runway: float | None = None
    vr_delta_alt: float | None = None
    vr_delta_slope: float | None = None
    vr_delta_wind: float | None = None
    vr: float | None = None
    v2_base: float | None = None
    v2_delta_runway: float | None = None
    v2_delta_alt: float | None = None
    v2_delta_slope: float | None = None
    v2_delta_wind: float | None = None
    v2_table2_threshold: float | None = None
    v2_no_wind: float | None = None
    v2: float | None = None
    dry_v1: int | None = None
    dry_vr: int | None = None
    dry_v2: int | None = None


@dataclass
class TakeoffResult:
    """Everything one calculation produced.

    Only ``inputs``, ``params`` and ``error`` are always meaningful. When
    ``error`` is not ``NONE`` the weights, flex and speeds may hold partial
    values and must not be relied on.
    """

    inputs: TakeoffInputs
    params: TakeoffParameters
    error: TakeoffPerformanceError = TakeoffPerformanceError.NONE
    limits: dict[LimitingFactor, LimitWeight] | None = None
    oat_limiting_factor: LimitingFactor | None = None
    t_ref_limiting_factor: LimitingFactor | None = None
    t_max_limiting_factor: LimitingFactor | None = None
    t_flex_max_limiting_factor: LimitingFactor | None = None
    mtow: float | None = None
    flex: float | None = None
    v1: int | None = None
    vr: int | None = None
    v2: int | None = None
    intermediate_speeds: TakeoffSpeeds | None = None
    tvmcg: float | None = None
    stab_trim: float | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is TakeoffPerformanceError.NONE

    def copy(self) -> "TakeoffResult":
        """Return an independent copy of this result."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data (enums as values, NaN as None)."""
        return _to_plain(self)


def _to_plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {_to_plain(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    if isinstance(value, float):
        return None if math.isnan(value) else float(value)
    return value
