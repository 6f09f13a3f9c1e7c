"""Compose and send the weekly on-call notification."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from oncall_bot.bot.messages import GREETING, ONCALL_MESSAGE
from oncall_bot.core.config import Settings
from oncall_bot.core.errors import MissingCredential
from oncall_bot.queue.models import Identified, NameOnly, Participant
from oncall_bot.queue.store import QueueStore

from .slack_client import ChatClient, SlackChatClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Settings], ChatClient]


def default_client_factory(settings: Settings) -> ChatClient:
    return SlackChatClient(settings.SLACK_BOT_TOKEN, timeout=settings.SLACK_TIMEOUT)


def addressee(participant: Participant) -> str:
    if isinstance(participant, Identified):
        return f"<@{participant.user_id}>"
    if isinstance(participant, NameOnly):
        return participant.name
    raise TypeError(f"Unsupported participant: {participant!r}")


def build_message(participant: Participant) -> str:
    return GREETING.format(addressee=addressee(participant)) + ONCALL_MESSAGE


def notify(participant: Participant, channel: str, client: ChatClient) -> None:
    """Post exactly one message addressed to ``participant``."""

    client.post_message(channel, build_message(participant))
    logger.info("Notification sent to %s", participant.name)


def notify_current(
    settings: Settings,
    store: QueueStore,
    client_factory: Optional[ClientFactory] = None,
) -> Participant:
    """Notify whoever is currently on call.

    Credentials are checked after the participant is resolved but before the
    client is created, so a misconfigured run never reaches Slack.
    """

    participant = store.resolve_current()
    if not settings.SLACK_BOT_TOKEN:
        raise MissingCredential("SLACK_BOT_TOKEN env var not set")
    if not settings.SLACK_CHANNEL:
        raise MissingCredential("SLACK_CHANNEL env var not set")

    factory = client_factory or default_client_factory
    notify(participant, settings.SLACK_CHANNEL, factory(settings))
    return participant
