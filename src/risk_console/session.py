from __future__ import annotations

import logging
from enum import Enum

from risk_console.console_io import LineIO
from risk_console.logging_config import new_session_id
from risk_console.prompts import ask_accident_count, ask_text, ask_vehicle_type, ask_year, ask_yes_no
from vehicle_risk.assessment import AssessmentRecord, evaluate, render_report
from vehicle_risk.config import DEFAULT_CONFIG, ScoringConfig
from vehicle_risk.data_models import Assessment, Vehicle

logger = logging.getLogger(__name__)

COMMERCIAL_QUESTION = "Is this a commercial vehicle"
CONTINUE_QUESTION = "Do you want to assess another vehicle"


class SessionState(str, Enum):
    COLLECT_INPUT = "collect_input"
    SCORE = "score"
    RECORD = "record"
    REPORT = "report"
    ASK_CONTINUE = "ask_continue"
    TERMINATE = "terminate"


def collect_vehicle(io: LineIO, config: ScoringConfig = DEFAULT_CONFIG) -> Vehicle:
    make = ask_text(io, "Enter vehicle make: ")
    model = ask_text(io, "Enter vehicle model: ")
    year = ask_year(io, config)
    vehicle_type = ask_vehicle_type(io)
    accident_count = ask_accident_count(io, config)
    is_commercial = ask_yes_no(io, COMMERCIAL_QUESTION)
    return Vehicle(
        make=make,
        model=model,
        year=year,
        vehicle_type=vehicle_type,
        accident_count=accident_count,
        is_commercial=is_commercial,
    )


def run_session(
    io: LineIO,
    record: AssessmentRecord | None = None,
    config: ScoringConfig | None = None,
) -> AssessmentRecord:
    """Assess vehicles until the user declines to continue.

    The full accumulated report is written after every assessment. The
    record is returned so callers can inspect what the session produced.
    """
    cfg = config or DEFAULT_CONFIG
    record = record if record is not None else AssessmentRecord()
    sid = new_session_id()
    logger.info("Session %s started", sid)

    state = SessionState.COLLECT_INPUT
    vehicle: Vehicle | None = None
    assessment: Assessment | None = None
    while state is not SessionState.TERMINATE:
        if state is SessionState.COLLECT_INPUT:
            vehicle = collect_vehicle(io, cfg)
            state = SessionState.SCORE
        elif state is SessionState.SCORE:
            assessment = evaluate(vehicle, cfg)
            state = SessionState.RECORD
        elif state is SessionState.RECORD:
            record.record(vehicle, assessment.level)
            state = SessionState.REPORT
        elif state is SessionState.REPORT:
            io.write(render_report(record))
            state = SessionState.ASK_CONTINUE
        elif state is SessionState.ASK_CONTINUE:
            again = ask_yes_no(io, CONTINUE_QUESTION)
            io.write("\n")
            state = SessionState.COLLECT_INPUT if again else SessionState.TERMINATE

    logger.info("Session %s finished with %d vehicle(s) on record", sid, len(record))
    return record
