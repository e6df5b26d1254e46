import logging

import pytest

from vehicle_risk.config import ScoringConfig
from vehicle_risk.data_models import RiskLevel, Vehicle, VehicleType
from vehicle_risk.scoring import (
    SCORING_RULES,
    accident_factor,
    age_factor,
    base_risk,
    categorize,
    has_dedicated_rule,
    score_car,
    score_vehicle,
)


def _car(year=2024, accidents=0, commercial=False, vehicle_type=VehicleType.CAR):
    return Vehicle(
        make="Toyota",
        model="Corolla",
        year=year,
        vehicle_type=vehicle_type,
        accident_count=accidents,
        is_commercial=commercial,
    )


@pytest.mark.parametrize("year", [1970, 1995, 2010, 2023, 2024])
@pytest.mark.parametrize("accidents", [0, 1, 4, 11])
def test_non_commercial_car_matches_formula_exactly(year, accidents):
    expected = 0.8 * (1 + (2024 - year) * 0.05) * (1 + accidents * 0.15)
    assert score_vehicle(_car(year=year, accidents=accidents)) == expected


def test_factors():
    vehicle = _car(year=2014, accidents=2)
    assert base_risk(vehicle) == 0.8
    assert age_factor(vehicle) == pytest.approx(1.5)
    assert accident_factor(vehicle) == pytest.approx(1.3)


def test_commercial_multiplies_base_by_one_and_a_half():
    assert base_risk(_car(commercial=True)) == 0.8 * 1.5
    plain = score_vehicle(_car(year=2001, accidents=3))
    commercial = score_vehicle(_car(year=2001, accidents=3, commercial=True))
    assert commercial == pytest.approx(plain * 1.5)


def test_scenario_a_new_private_car_is_low():
    vehicle = Vehicle(make="Toyota", model="Corolla", year=2024, vehicle_type=VehicleType.CAR)
    score = score_vehicle(vehicle)
    assert score == 0.8
    assert categorize(score) is RiskLevel.LOW


def test_scenario_b_old_commercial_with_accidents_is_high():
    vehicle = Vehicle(
        make="Ford",
        model="F150",
        year=2014,
        vehicle_type=VehicleType.CAR,
        accident_count=2,
        is_commercial=True,
    )
    score = score_vehicle(vehicle)
    assert score == pytest.approx(2.34)
    assert categorize(score) is RiskLevel.HIGH


@pytest.mark.parametrize(
    "score,level",
    [
        (0.0, RiskLevel.LOW),
        (1.19999, RiskLevel.LOW),
        (1.2, RiskLevel.MEDIUM),
        (1.79999, RiskLevel.MEDIUM),
        (1.8, RiskLevel.HIGH),
        (5.0, RiskLevel.HIGH),
    ],
)
def test_categorize_thresholds(score, level):
    assert categorize(score) is level


def test_scoring_is_idempotent():
    vehicle = _car(year=1988, accidents=7, commercial=True)
    assert score_vehicle(vehicle) == score_vehicle(vehicle)


def test_future_year_is_not_clamped():
    # 2064 gives an age factor of exactly -1.0
    vehicle = _car(year=2064)
    assert age_factor(vehicle) == pytest.approx(-1.0)
    assert score_vehicle(vehicle) < 0


def test_custom_config_changes_formula():
    config = ScoringConfig(base_risk=1.0, reference_year=2030, medium_threshold=2.0)
    vehicle = _car(year=2030)
    assert score_vehicle(vehicle, config) == 1.0
    assert categorize(1.5, config) is RiskLevel.LOW


def test_every_vehicle_type_has_a_rule():
    assert set(SCORING_RULES) == set(VehicleType)
    assert SCORING_RULES[VehicleType.CAR] is score_car
    assert has_dedicated_rule(VehicleType.CAR)
    assert not has_dedicated_rule(VehicleType.TRUCK)
    assert not has_dedicated_rule(VehicleType.MOTORCYCLE)


@pytest.mark.parametrize("vehicle_type", [VehicleType.TRUCK, VehicleType.MOTORCYCLE])
def test_types_without_rule_use_car_rule_and_warn(vehicle_type, caplog):
    vehicle = _car(year=2010, accidents=1, vehicle_type=vehicle_type)
    with caplog.at_level(logging.WARNING, logger="vehicle_risk.scoring"):
        score = score_vehicle(vehicle)
    assert score == score_vehicle(_car(year=2010, accidents=1))
    assert "No dedicated scoring rule" in caplog.text


def test_car_scoring_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="vehicle_risk.scoring"):
        score_vehicle(_car())
    assert caplog.records == []
