"""Thin wrapper around the Slack Web API client."""
from __future__ import annotations

from typing import Protocol

from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web import WebClient

from oncall_bot.core.errors import NotificationFailed


class ChatClient(Protocol):
    def post_message(self, channel: str, text: str) -> None:
        ...


class SlackChatClient:
    """Posts messages with mentions rendered and link previews disabled."""

    def __init__(self, token: str, *, timeout: int = 30, client: WebClient | None = None):
        self._client = client or WebClient(token=token, timeout=timeout)

    def post_message(self, channel: str, text: str) -> None:
        try:
            self._client.chat_postMessage(
                channel=channel,
                text=text,
                mrkdwn=True,
                unfurl_links=False,
                unfurl_media=False,
            )
        except SlackApiError as exc:
            error = exc.response.get("error") if exc.response is not None else None
            raise NotificationFailed(f"Slack API error: {error or exc}") from exc
        except (SlackClientError, OSError) as exc:
            raise NotificationFailed(f"Could not reach Slack: {exc}") from exc
