"""Plain-text persistence for the queue and the current participant."""
from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from ..core.config import Settings
from ..core.errors import EmptyQueue, StorageUnavailable
from .models import Participant, format_participant, parse_participant

logger = logging.getLogger(__name__)


def _reason(exc: Exception) -> str:
    return getattr(exc, "strerror", None) or str(exc)


class QueueStore:
    """Reads the ``queue`` file and reads/writes the ``current`` file."""

    def __init__(self, queue_path: Path, current_path: Path):
        self.queue_path = Path(queue_path)
        self.current_path = Path(current_path)

    @classmethod
    def from_settings(cls, settings: Settings) -> "QueueStore":
        return cls(settings.QUEUE_FILE, settings.CURRENT_FILE)

    def read_queue(self) -> list[Participant]:
        try:
            content = self.queue_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageUnavailable(self.queue_path, _reason(exc)) from exc
        return [
            parse_participant(line)
            for line in content.splitlines()
            if line.strip()
        ]

    def read_current(self) -> Optional[Participant]:
        """Return the stored current participant, or ``None`` if there is none.

        A missing or blank file means "not found". Other read failures, such
        as permission errors, are raised as :class:`StorageUnavailable`.
        """

        try:
            content = self.current_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Current file %s does not exist", self.current_path)
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageUnavailable(self.current_path, _reason(exc)) from exc
        text = content.strip()
        if not text:
            logger.info("Current file %s is empty", self.current_path)
            return None
        return parse_participant(text)

    def resolve_current(self, queue: Optional[Sequence[Participant]] = None) -> Participant:
        """Return the current participant, defaulting to the head of the queue."""

        current = self.read_current()
        if current is not None:
            return current
        if queue is None:
            queue = self.read_queue()
        if not queue:
            raise EmptyQueue()
        logger.info("Falling back to the first person in the queue: %s", queue[0])
        return queue[0]

    def write_current(self, participant: Participant) -> None:
        """Atomically replace the current file with ``participant``."""

        directory = self.current_path.parent
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".current_", dir=directory)
        except OSError as exc:
            raise StorageUnavailable(self.current_path, _reason(exc)) from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fp:
                fp.write(format_participant(participant))
                fp.flush()
                os.fsync(fp.fileno())
            os.chmod(tmp_path, self._current_mode())
            os.replace(tmp_path, self.current_path)
        except OSError as exc:
            try:
                os.unlink(tmp_path)
            except FileNotFoundError:
                pass
            raise StorageUnavailable(self.current_path, _reason(exc)) from exc

    def _current_mode(self) -> int:
        """Mode of the existing current file, or the umask default for a new one."""

        try:
            return stat.S_IMODE(self.current_path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
