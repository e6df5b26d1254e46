from __future__ import annotations

import logging
from typing import Dict, ItemsView

from vehicle_risk.config import ScoringConfig
from vehicle_risk.data_models import Assessment, RiskLevel, Vehicle
from vehicle_risk.scoring import categorize, score_vehicle

logger = logging.getLogger(__name__)


class AssessmentRecord:
    """Latest risk level per vehicle identifier for one session.

    Vehicles sharing a make and model share an identifier, so assessing the
    second one replaces the first entry. Nothing is persisted.
    """

    def __init__(self) -> None:
        self._levels: Dict[str, RiskLevel] = {}

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._levels

    def get(self, identifier: str) -> RiskLevel | None:
        return self._levels.get(identifier)

    def items(self) -> ItemsView[str, RiskLevel]:
        return self._levels.items()

    def record(self, vehicle: Vehicle, level: RiskLevel) -> None:
        identifier = vehicle.identifier
        if identifier in self._levels:
            logger.info("Overwriting risk level for %s (%s -> %s)", identifier, self._levels[identifier].value, level.value)
        self._levels[identifier] = level

    def assess(self, vehicle: Vehicle, config: ScoringConfig | None = None) -> Assessment:
        assessment = evaluate(vehicle, config)
        self.record(vehicle, assessment.level)
        return assessment


def evaluate(vehicle: Vehicle, config: ScoringConfig | None = None) -> Assessment:
    score = score_vehicle(vehicle, config)
    level = categorize(score, config)
    logger.debug(
        "Assessed %s",
        vehicle.identifier,
        extra={"extra_data": {"score": score, "level": level.value, "vehicle_type": vehicle.vehicle_type.value}},
    )
    return Assessment(identifier=vehicle.identifier, score=score, level=level)


def render_report(record: AssessmentRecord) -> str:
    lines = []
    for identifier, level in sorted(record.items()):
        lines.append(f"Vehicle: {identifier}\nRisk Level: {level.value}\n")
    return "".join(lines)
