from typing import Iterable, List, Optional, Sequence, Tuple

import pytest

from dos_terminal.console.display import DisplayOp, TextType, Write, WriteLine
from dos_terminal.content import ContentEntry, ContentStore, StaticContentStore
from dos_terminal.runtime_config import RuntimeConfig

TEST_ENTRIES = (
    ContentEntry(
        id="1",
        title="First Post",
        date="2026-01-01",
        content="Line one\n\nLine three",
        tags=("alpha", "beta"),
    ),
    ContentEntry(
        id="ABC",
        title="Lettered Post",
        date="2026-01-02",
        content="Only line",
        tags=("gamma",),
    ),
)


def plain_text(ops: Iterable[DisplayOp]) -> str:
    """Flatten writes into plain text, ignoring erasures and clears."""
    parts = []
    for op in ops:
        if isinstance(op, Write):
            parts.append(str(op.text))
        elif isinstance(op, WriteLine):
            parts.append(f"{op.text}\n")
    return "".join(parts)


class RecordingDisplay:
    """Display sink that records calls and keeps a plain-text screen."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, object]] = []
        self.screen = ""

    def write(self, text: TextType) -> None:
        self.calls.append(("write", str(text)))
        self.screen += str(text)

    def write_line(self, text: TextType = "") -> None:
        self.calls.append(("write_line", str(text)))
        self.screen += f"{text}\n"

    def erase(self, count: int) -> None:
        self.calls.append(("erase", count))
        self.screen = self.screen[:-count]

    def clear(self) -> None:
        self.calls.append(("clear", None))
        self.screen = ""

    @property
    def current_line(self) -> str:
        return self.screen.rsplit("\n", 1)[-1]


class CountingStore:
    """Content store wrapper that counts lookups."""

    def __init__(self, entries: Sequence[ContentEntry] = TEST_ENTRIES) -> None:
        self._store = StaticContentStore(entries)
        self.lookups: List[str] = []

    def find_by_id(self, entry_id: str) -> Optional[ContentEntry]:
        self.lookups.append(entry_id)
        return self._store.find_by_id(entry_id)

    def list_all(self) -> Sequence[ContentEntry]:
        return self._store.list_all()


class MockConsole:
    """Mock console for testing."""

    def __init__(self, config: RuntimeConfig, store: ContentStore):
        self.config = config
        self.store = store
        self.run_called = False

    async def run(self) -> None:
        self.run_called = True


@pytest.fixture
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()
