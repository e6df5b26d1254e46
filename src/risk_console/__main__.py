from __future__ import annotations

import logging
import sys

from risk_console.console_io import ConsoleIO, LineIO
from risk_console.logging_config import configure_logging
from risk_console.session import run_session
from risk_console.settings import ConsoleSettings

logger = logging.getLogger(__name__)


def main(io: LineIO | None = None) -> int:
    try:
        settings = ConsoleSettings()
        configure_logging(level=settings.log_level, fmt=settings.log_format)
        run_session(io or ConsoleIO())
    except (Exception, KeyboardInterrupt) as exc:
        logger.debug("Session aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
