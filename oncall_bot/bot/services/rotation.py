"""Round-robin rotation of the on-call queue."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from oncall_bot.queue.models import Participant, format_participant
from oncall_bot.queue.store import QueueStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RotationResult:
    previous: Participant
    current: Participant
    rotated: bool


def next_participant(
    queue: Sequence[Participant], current: Participant
) -> Optional[Participant]:
    """Return who follows ``current``, or ``None`` when there is nothing to rotate.

    Participants are matched on their one-line text form and the first
    occurrence wins. An unknown ``current`` or the last entry wraps to the head.
    """

    if len(queue) <= 1:
        return None
    wanted = format_participant(current)
    index = next(
        (i for i, item in enumerate(queue) if format_participant(item) == wanted),
        None,
    )
    if index is None or index == len(queue) - 1:
        return queue[0]
    return queue[index + 1]


def rotate(queue: Sequence[Participant], current: Participant) -> Participant:
    following = next_participant(queue, current)
    return current if following is None else following


def rotate_queue(store: QueueStore) -> RotationResult:
    """Advance the persisted current participant by one step."""

    queue = store.read_queue()
    previous = store.resolve_current(queue)
    following = next_participant(queue, previous)
    if following is None:
        logger.info("Queue has only one person or is empty, no need to rotate")
        return RotationResult(previous=previous, current=previous, rotated=False)

    store.write_current(following)
    logger.info("Rotated queue: current person is now %s", following)
    return RotationResult(previous=previous, current=following, rotated=True)
