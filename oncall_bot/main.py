"""Command line entry point: ``oncall-bot notify`` or ``oncall-bot rotate``."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from oncall_bot.bot.commands import run_command
from oncall_bot.core.config import Settings
from oncall_bot.core.errors import OnCallError
from oncall_bot.core.logger import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    command = args[0] if args else ""

    try:
        settings = Settings()
    except ValidationError as exc:
        setup_logging()
        logger.error("Error: invalid configuration: %s", exc)
        return 1

    setup_logging(settings.LOG_LEVEL)
    try:
        run_command(command, settings)
    except OnCallError as exc:
        logger.error("Error: %s", exc)
        return 1
    return 0
