"""Participant model and the file-backed queue store."""

from .models import Identified, NameOnly, Participant, format_participant, parse_participant
from .store import QueueStore

__all__ = [
    "Identified",
    "NameOnly",
    "Participant",
    "QueueStore",
    "format_participant",
    "parse_participant",
]
