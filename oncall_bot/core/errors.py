"""Errors surfaced at the command boundary."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable


class OnCallError(Exception):
    """Base class for every failure the entry point reports."""


class UnknownCommand(OnCallError):
    def __init__(self, command: str, available: Iterable[str]) -> None:
        self.command = command
        self.available = list(available)
        super().__init__(
            f"Unknown command: {command}. "
            f"Available commands: {', '.join(self.available)}"
        )


class MissingCredential(OnCallError):
    """A Slack token or channel was not configured."""


class EmptyQueue(OnCallError):
    def __init__(self) -> None:
        super().__init__("Queue is empty")


class StorageUnavailable(OnCallError):
    """A queue or current file could not be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class NotificationFailed(OnCallError):
    """The chat API rejected the message."""
