from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    base_risk: float = 0.8
    commercial_multiplier: float = 1.5
    reference_year: int = 2024
    age_rate: float = 0.05
    accident_rate: float = 0.15
    medium_threshold: float = 1.2
    high_threshold: float = 1.8
    # Accepted model years at the console
    min_year: int = 1970
    max_year: int = 2024
    # Largest accident count the console accepts (32-bit signed int)
    max_accidents: int = 2**31 - 1


DEFAULT_CONFIG = ScoringConfig()
