from __future__ import annotations

import logging
import re
from typing import Annotated

from pydantic import BeforeValidator, Field, TypeAdapter, ValidationError

from risk_console.console_io import LineIO
from vehicle_risk.config import DEFAULT_CONFIG, ScoringConfig
from vehicle_risk.data_models import VehicleType

logger = logging.getLogger(__name__)

YEAR_PROMPT = "Enter vehicle year: "
# The enforced lower bound is ScoringConfig.min_year (1970); this message has
# always said 1900 and is kept as-is until product decides which one is right.
YEAR_RETRY = "Invalid year. Please enter a year between 1900 and 2024: "

VEHICLE_TYPE_MENU = "Select Vehicle Type:\n1. Car\n2. Truck\n3. Motorcycle\n"
VEHICLE_TYPE_PROMPT = "Enter your choice (1-3): "
VEHICLE_TYPE_NOT_A_NUMBER = "Invalid input. Please enter 1, 2, or 3: "
VEHICLE_TYPE_BAD_CHOICE = "Invalid choice. Please enter 1, 2, or 3: "

ACCIDENTS_PROMPT = "Enter number of accidents: "
ACCIDENTS_RETRY = "Invalid input. Please enter a non-negative number: "

YES_NO_RETRY = "Invalid input. Please enter y or n: "

VEHICLE_TYPE_CHOICES = {
    1: VehicleType.CAR,
    2: VehicleType.TRUCK,
    3: VehicleType.MOTORCYCLE,
}

_PLAIN_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def _plain_integer(value: str) -> int:
    # Only an optional sign and ASCII digits; no "2014.0", "2_014" or "1e3".
    if not _PLAIN_INTEGER.fullmatch(value):
        raise ValueError("not a whole number")
    return int(value)


WholeNumber = Annotated[int, BeforeValidator(_plain_integer)]

_INT = TypeAdapter(Annotated[WholeNumber, Field(ge=_INT32_MIN, le=_INT32_MAX)])


def _year_adapter(config: ScoringConfig) -> TypeAdapter:
    return TypeAdapter(Annotated[WholeNumber, Field(ge=config.min_year, le=config.max_year)])


def _accident_adapter(config: ScoringConfig) -> TypeAdapter:
    return TypeAdapter(Annotated[WholeNumber, Field(ge=0, le=config.max_accidents)])


def ask_text(io: LineIO, prompt: str) -> str:
    return io.read_line(prompt)


def ask_year(io: LineIO, config: ScoringConfig = DEFAULT_CONFIG) -> int:
    adapter = _year_adapter(config)
    prompt = YEAR_PROMPT
    while True:
        raw = io.read_line(prompt).strip()
        try:
            return adapter.validate_python(raw)
        except ValidationError:
            logger.debug("Rejected year input %r", raw)
            prompt = YEAR_RETRY


def ask_vehicle_type(io: LineIO) -> VehicleType:
    io.write(VEHICLE_TYPE_MENU)
    prompt = VEHICLE_TYPE_PROMPT
    while True:
        raw = io.read_line(prompt).strip()
        try:
            choice = _INT.validate_python(raw)
        except ValidationError:
            logger.debug("Rejected vehicle type input %r", raw)
            prompt = VEHICLE_TYPE_NOT_A_NUMBER
            continue
        vehicle_type = VEHICLE_TYPE_CHOICES.get(choice)
        if vehicle_type is not None:
            return vehicle_type
        logger.debug("Rejected vehicle type choice %d", choice)
        prompt = VEHICLE_TYPE_BAD_CHOICE


def ask_accident_count(io: LineIO, config: ScoringConfig = DEFAULT_CONFIG) -> int:
    adapter = _accident_adapter(config)
    prompt = ACCIDENTS_PROMPT
    while True:
        raw = io.read_line(prompt).strip()
        try:
            return adapter.validate_python(raw)
        except ValidationError:
            logger.debug("Rejected accident count input %r", raw)
            prompt = ACCIDENTS_RETRY


def ask_yes_no(io: LineIO, question: str) -> bool:
    """Ask a y/n question; only the first non-blank character counts."""
    prompt = f"{question} (y/n): "
    while True:
        raw = io.read_line(prompt).strip()
        answer = raw[:1].lower()
        if answer == "y":
            return True
        if answer == "n":
            return False
        prompt = YES_NO_RETRY
