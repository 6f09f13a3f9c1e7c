"""Rotation order, wrap-around and persistence."""
from pathlib import Path

import pytest

from oncall_bot.bot.services.rotation import next_participant, rotate, rotate_queue
from oncall_bot.core.errors import EmptyQueue
from oncall_bot.queue.models import Identified, NameOnly
from oncall_bot.queue.store import QueueStore

KAI = Identified("U1", "Kai")
IRSHAD = NameOnly("Irshad")
MINH = NameOnly("Minh")
QUEUE = [KAI, IRSHAD, MINH]


@pytest.mark.parametrize(
    "current, expected",
    [
        (KAI, IRSHAD),
        (IRSHAD, MINH),
        (MINH, KAI),
        (NameOnly("Unknown"), KAI),
    ],
)
def test_rotate(current, expected) -> None:
    assert rotate(QUEUE, current) == expected


@pytest.mark.parametrize(
    "size, index",
    [(size, index) for size in range(2, 7) for index in range(size)],
)
def test_rotate_any_queue(size: int, index: int) -> None:
    queue = [
        Identified(f"U{n}", f"Person {n}") if n % 2 else NameOnly(f"Person {n}")
        for n in range(size)
    ]

    expected = queue[0] if index == size - 1 else queue[index + 1]

    assert rotate(queue, queue[index]) == expected
    assert rotate(queue, NameOnly("Nobody")) == queue[0]


@pytest.mark.parametrize("queue", [[], [KAI]])
def test_short_queue_is_left_alone(queue) -> None:
    assert next_participant(queue, MINH) is None
    assert rotate(queue, MINH) == MINH


def test_matching_uses_full_text_not_user_id() -> None:
    queue = [KAI, IRSHAD, MINH]

    assert rotate(queue, Identified("U1", "Someone else")) == KAI
    assert rotate(queue, NameOnly("kai")) == KAI


def test_duplicates_match_first_occurrence() -> None:
    queue = [KAI, IRSHAD, KAI, MINH]

    assert rotate(queue, KAI) == IRSHAD


def test_rotate_queue_persists(store: QueueStore, current_file: Path) -> None:
    current_file.write_text("U1, Kai", encoding="utf-8")

    result = rotate_queue(store)

    assert result.rotated
    assert result.previous == KAI
    assert result.current == IRSHAD
    assert current_file.read_text(encoding="utf-8") == "Irshad"


def test_rotate_queue_without_current_starts_after_head(
    store: QueueStore, current_file: Path
) -> None:
    result = rotate_queue(store)

    assert result.current == IRSHAD
    assert current_file.read_text(encoding="utf-8") == "Irshad"


def test_rotate_queue_single_person_does_not_write(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("INFO")
    queue = tmp_path / "queue"
    current = tmp_path / "current"
    queue.write_text("U1, Kai\n", encoding="utf-8")
    current.write_text("U1, Kai", encoding="utf-8")
    before = current.stat().st_mtime_ns

    result = rotate_queue(QueueStore(queue, current))

    assert not result.rotated
    assert result.current == KAI
    assert current.stat().st_mtime_ns == before
    assert "no need to rotate" in caplog.text


def test_rotate_queue_empty_queue_with_current_is_noop(tmp_path: Path) -> None:
    queue = tmp_path / "queue"
    current = tmp_path / "current"
    queue.write_text("", encoding="utf-8")
    current.write_text("U1, Kai", encoding="utf-8")

    result = rotate_queue(QueueStore(queue, current))

    assert not result.rotated
    assert current.read_text(encoding="utf-8") == "U1, Kai"


def test_rotate_queue_empty_queue_without_current(tmp_path: Path) -> None:
    queue = tmp_path / "queue"
    queue.write_text("\n", encoding="utf-8")

    with pytest.raises(EmptyQueue):
        rotate_queue(QueueStore(queue, tmp_path / "current"))

    assert not (tmp_path / "current").exists()
