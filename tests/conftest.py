"""Pytest configuration and fixtures for all tests."""

import pytest

from takeoffperf.core.logging_system import initialize_logging, shutdown_logging
from takeoffperf.performance.types import (
    AntiIceSetting,
    LineupAngle,
    RunwayCondition,
    TakeoffInputs,
)


@pytest.fixture(scope="session", autouse=True)
def initialize_default_logging():
    """Initialize logging with the default (console only) configuration.

    This is a session-scoped fixture that runs automatically
    at the start of the test session.
    """
    initialize_logging()

    yield

    shutdown_logging()


@pytest.fixture
def dry_inputs() -> TakeoffInputs:
    """Dry runway takeoff at sea level in ISA conditions, CONF 2."""
    return TakeoffInputs(
        tow=400_000.0,
        forward_cg=False,
        conf=2,
        tora=4000.0,
        slope=0.0,
        lineup_angle=LineupAngle.ZERO,
        wind=0.0,
        elevation=0.0,
        qnh=1013.25,
        oat=15.0,
        anti_ice=AntiIceSetting.OFF,
        packs=False,
        force_toga=False,
        runway_condition=RunwayCondition.DRY,
    )
