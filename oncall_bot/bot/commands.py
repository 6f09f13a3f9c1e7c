"""Command table for the ``notify`` and ``rotate`` entry points."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from oncall_bot.bot.services.notifier import ClientFactory, notify_current
from oncall_bot.bot.services.rotation import rotate_queue
from oncall_bot.core.config import Settings
from oncall_bot.core.errors import UnknownCommand
from oncall_bot.queue.store import QueueStore

logger = logging.getLogger(__name__)

CommandHandler = Callable[[], None]


def build_commands(
    settings: Settings,
    *,
    client_factory: Optional[ClientFactory] = None,
) -> Dict[str, CommandHandler]:
    store = QueueStore.from_settings(settings)

    def _notify() -> None:
        try:
            notify_current(settings, store, client_factory)
        except Exception as exc:
            logger.error("Error sending notification: %s", exc)
            raise

    def _rotate() -> None:
        try:
            rotate_queue(store)
        except Exception as exc:
            logger.error("Error rotating queue: %s", exc)
            raise

    return {"notify": _notify, "rotate": _rotate}


def run_command(
    command: str,
    settings: Settings,
    *,
    client_factory: Optional[ClientFactory] = None,
) -> None:
    commands = build_commands(settings, client_factory=client_factory)
    handler = commands.get(command)
    if handler is None:
        raise UnknownCommand(command, commands)
    handler()
