"""Tests for takeoff input parsing and shared types."""

import pytest

from takeoffperf.core.config import ConfigError
from takeoffperf.performance.types import (
    AntiIceSetting,
    LineupAngle,
    PerConfiguration,
    RunwayCondition,
    TakeoffConfiguration,
    TakeoffInputs,
)


@pytest.fixture
def case() -> dict:
    """Minimal takeoff case mapping."""
    return {"tow": 400000, "conf": 2, "tora": 4000, "elevation": 0, "qnh": 1013.25, "oat": 15}


class TestTakeoffInputsFromDict:
    """Test building inputs from YAML-style mappings."""

    def test_defaults(self, case: dict) -> None:
        """Test optional fields get their defaults."""
        inputs = TakeoffInputs.from_dict(case)
        assert inputs.tow == 400_000.0
        assert inputs.conf == 2
        assert inputs.slope == 0.0
        assert inputs.wind == 0.0
        assert inputs.lineup_angle is LineupAngle.ZERO
        assert inputs.anti_ice is AntiIceSetting.OFF
        assert inputs.runway_condition is RunwayCondition.DRY
        assert not inputs.packs
        assert not inputs.force_toga
        assert not inputs.forward_cg
        assert inputs.cg is None

    def test_enums_by_value_or_name(self, case: dict) -> None:
        """Test enum fields accept values and member names."""
        inputs = TakeoffInputs.from_dict(
            {**case, "lineup_angle": 90, "anti_ice": "ENGINE_WING", "runway_condition": "slush_13mm", "cg": 28}
        )
        assert inputs.lineup_angle is LineupAngle.NINETY
        assert inputs.anti_ice is AntiIceSetting.ENGINE_WING
        assert inputs.runway_condition is RunwayCondition.SLUSH_13MM
        assert inputs.cg == 28.0

    def test_bare_yaml_off(self, case: dict) -> None:
        """Test an unquoted YAML off, read as False, selects no anti-ice."""
        assert TakeoffInputs.from_dict({**case, "anti_ice": False}).anti_ice is AntiIceSetting.OFF

    def test_bare_yaml_on(self, case: dict) -> None:
        """Test an unquoted YAML on is not an anti-ice setting."""
        with pytest.raises(ConfigError, match="anti_ice"):
            TakeoffInputs.from_dict({**case, "anti_ice": True})

    def test_unknown_key(self, case: dict) -> None:
        """Test unknown keys are rejected."""
        with pytest.raises(ConfigError, match="Unknown takeoff input"):
            TakeoffInputs.from_dict({**case, "flaps": 2})

    def test_missing_key(self, case: dict) -> None:
        """Test required keys must be present."""
        del case["qnh"]
        with pytest.raises(ConfigError, match="Missing takeoff input"):
            TakeoffInputs.from_dict(case)

    def test_bad_enum(self, case: dict) -> None:
        """Test an unknown runway condition is rejected."""
        with pytest.raises(ConfigError, match="runway_condition"):
            TakeoffInputs.from_dict({**case, "runway_condition": "ice"})

    def test_bad_number(self, case: dict) -> None:
        """Test non-numeric values are rejected."""
        with pytest.raises(ConfigError, match="Invalid takeoff input"):
            TakeoffInputs.from_dict({**case, "tow": "heavy"})

    def test_inputs_are_frozen(self, case: dict) -> None:
        """Test inputs cannot be mutated."""
        inputs = TakeoffInputs.from_dict(case)
        with pytest.raises(AttributeError):
            inputs.tow = 1.0  # type: ignore[misc]


class TestEnums:
    """Test enum helpers."""

    def test_contaminated_conditions(self) -> None:
        """Test only dry and wet are uncontaminated."""
        clean = {c for c in RunwayCondition if not c.is_contaminated}
        assert clean == {RunwayCondition.DRY, RunwayCondition.WET}

    def test_per_configuration_index(self) -> None:
        """Test per-configuration records are indexed by configuration."""
        record = PerConfiguration(conf1="a", conf2="b", conf3="c")
        assert record[TakeoffConfiguration.CONF_1] == "a"
        assert record[TakeoffConfiguration.CONF_3] == "c"
