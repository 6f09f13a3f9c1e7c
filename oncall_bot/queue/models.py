"""Participants of the on-call rotation and their one-line text form."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Identified:
    """A participant with a Slack user id, addressed by mention."""

    user_id: str
    name: str

    def __str__(self) -> str:
        return f"{self.user_id}, {self.name}"


@dataclass(frozen=True)
class NameOnly:
    """A participant known only by display name."""

    name: str

    def __str__(self) -> str:
        return self.name


Participant = Union[Identified, NameOnly]


def parse_participant(line: str) -> Participant:
    """Parse ``"U123, Name"`` or ``"Name"``.

    Only the first comma separates the id from the name, so names may contain
    commas. An empty id part yields :class:`NameOnly`.
    """

    text = line.strip()
    if "," not in text:
        return NameOnly(name=text)
    user_id, name = (part.strip() for part in text.split(",", maxsplit=1))
    if not user_id:
        return NameOnly(name=name)
    return Identified(user_id=user_id, name=name)


def format_participant(participant: Participant) -> str:
    return str(participant).strip()
