from __future__ import annotations

import logging
from typing import Callable, Dict

from vehicle_risk.config import DEFAULT_CONFIG, ScoringConfig
from vehicle_risk.data_models import RiskLevel, Vehicle, VehicleType

logger = logging.getLogger(__name__)

ScoringRule = Callable[[Vehicle, ScoringConfig], float]


def base_risk(vehicle: Vehicle, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    multiplier = config.commercial_multiplier if vehicle.is_commercial else 1.0
    return config.base_risk * multiplier


def age_factor(vehicle: Vehicle, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    # Not clamped: a year past reference_year shrinks the factor, possibly below zero.
    return 1.0 + (config.reference_year - vehicle.year) * config.age_rate


def accident_factor(vehicle: Vehicle, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    return 1.0 + vehicle.accident_count * config.accident_rate


def score_car(vehicle: Vehicle, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    risk = base_risk(vehicle, config)
    return risk * age_factor(vehicle, config) * accident_factor(vehicle, config)


# One rule per vehicle type. Trucks and motorcycles have no rule of their own
# yet and are scored as cars until one is defined.
SCORING_RULES: Dict[VehicleType, ScoringRule] = {
    VehicleType.CAR: score_car,
    VehicleType.TRUCK: score_car,
    VehicleType.MOTORCYCLE: score_car,
}

_DEDICATED_RULES = frozenset({VehicleType.CAR})


def has_dedicated_rule(vehicle_type: VehicleType) -> bool:
    return vehicle_type in _DEDICATED_RULES


def score_vehicle(vehicle: Vehicle, config: ScoringConfig | None = None) -> float:
    """Score a vehicle with the rule registered for its type.

    The result is ``base * age_factor * accident_factor`` with no rounding,
    so identical vehicles always produce bit-identical scores.
    """
    cfg = config or DEFAULT_CONFIG
    if not has_dedicated_rule(vehicle.vehicle_type):
        logger.warning(
            "No dedicated scoring rule for %s; scoring %s with the car rule",
            vehicle.vehicle_type.value,
            vehicle.identifier,
        )
    rule = SCORING_RULES[vehicle.vehicle_type]
    return rule(vehicle, cfg)


def categorize(score: float, config: ScoringConfig | None = None) -> RiskLevel:
    cfg = config or DEFAULT_CONFIG
    if score < cfg.medium_threshold:
        return RiskLevel.LOW
    if score < cfg.high_threshold:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH
