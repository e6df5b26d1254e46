from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VehicleType(str, Enum):
    CAR = "car"
    TRUCK = "truck"
    MOTORCYCLE = "motorcycle"


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class Vehicle:
    make: str
    model: str
    year: int
    vehicle_type: VehicleType
    accident_count: int = 0
    is_commercial: bool = False

    @property
    def identifier(self) -> str:
        return f"{self.make} {self.model}"


@dataclass(frozen=True)
class Assessment:
    identifier: str
    score: float
    level: RiskLevel
