"""Shared fixtures for the on-call rotation tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from oncall_bot.core.config import Settings
from oncall_bot.queue.store import QueueStore

QUEUE = "U1, Kai\nIrshad\nMinh\n"


class FakeChatClient:
    """Records posted messages instead of calling Slack."""

    def __init__(self) -> None:
        self.posts: list[tuple[str, str]] = []

    def post_message(self, channel: str, text: str) -> None:
        self.posts.append((channel, text))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SLACK_BOT_TOKEN",
        "SLACK_CHANNEL",
        "SLACK_TIMEOUT",
        "QUEUE_FILE",
        "CURRENT_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def queue_file(tmp_path: Path) -> Path:
    path = tmp_path / "queue"
    path.write_text(QUEUE, encoding="utf-8")
    return path


@pytest.fixture
def current_file(tmp_path: Path) -> Path:
    return tmp_path / "current"


@pytest.fixture
def store(queue_file: Path, current_file: Path) -> QueueStore:
    return QueueStore(queue_file, current_file)


@pytest.fixture
def settings(queue_file: Path, current_file: Path) -> Settings:
    return Settings(
        _env_file=None,
        SLACK_BOT_TOKEN="xoxb-test",
        SLACK_CHANNEL="C123",
        QUEUE_FILE=queue_file,
        CURRENT_FILE=current_file,
    )


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()
