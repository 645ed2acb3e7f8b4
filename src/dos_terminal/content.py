"""
Read-only content store for the entries LIST and READ render.

This module provides:
- ContentEntry: an immutable entry record.
- ContentStore: the lookup protocol the console consumes.
- StaticContentStore: an in-memory store with a fixed entry order.
- load_content(): build a store from a JSON file.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)


class ContentLoadError(Exception):
    """Raised when a content file cannot be turned into a store."""


@dataclass(frozen=True)
class ContentEntry:
    """A single identifier-keyed entry."""

    id: str
    title: str
    date: str
    content: str
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def lines(self) -> List[str]:
        return self.content.split("\n")


class ContentStore(Protocol):
    """Read-only lookup by identifier plus ordered listing."""

    def find_by_id(self, entry_id: str) -> Optional[ContentEntry]: ...

    def list_all(self) -> Sequence[ContentEntry]: ...


class StaticContentStore:
    """Content store backed by a fixed, ordered tuple of entries."""

    def __init__(self, entries: Iterable[ContentEntry]) -> None:
        self._entries: Tuple[ContentEntry, ...] = tuple(entries)
        self._by_id: Dict[str, ContentEntry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise ContentLoadError(f"Duplicate entry id: {entry.id}")
            self._by_id[entry.id] = entry

    def find_by_id(self, entry_id: str) -> Optional[ContentEntry]:
        return self._by_id.get(entry_id)

    def list_all(self) -> Sequence[ContentEntry]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_ENTRIES: Tuple[ContentEntry, ...] = (
    ContentEntry(
        id="1",
        title="Welcome to DOS Terminal",
        date="2026-02-09",
        content="""Welcome to my DOS-style terminal space!

This is a retro-inspired interface running in your terminal.
You can navigate using classic DOS commands.

Available commands:
- HELP    - Show available commands
- LIST    - List all entries
- READ <id> - Read a specific entry
- CLEAR   - Clear the terminal
- ABOUT   - About this terminal
- EXIT    - Exit (press Ctrl+D)

Enjoy your stay in the terminal!""",
        tags=("welcome", "intro"),
    ),
    ContentEntry(
        id="2",
        title="Building a DOS Terminal",
        date="2026-02-09",
        content="""I've always been fascinated by retro computing and terminal interfaces.
There's something beautiful about the simplicity and directness of command-line interfaces.

This experience is built using:
- Rich for rendering
- prompt_toolkit for raw key input
- Typer for the command line

The DOS aesthetic brings back memories of simpler times when computing was more direct and less cluttered.""",
        tags=("tech", "retro", "python"),
    ),
    ContentEntry(
        id="3",
        title="The Art of Minimalism",
        date="2026-02-08",
        content="""Minimalism in design isn't about removing everything.
It's about keeping only what's essential.

In terminal interfaces, every character matters.
Every command serves a purpose.
There's no room for unnecessary decoration.

This philosophy extends beyond code to life itself.""",
        tags=("philosophy", "design", "minimalism"),
    ),
)


def default_store() -> StaticContentStore:
    """Return a store holding the built-in entries."""
    return StaticContentStore(DEFAULT_ENTRIES)


def _entry_from_dict(raw: Any, index: int) -> ContentEntry:
    if not isinstance(raw, dict):
        raise ContentLoadError(f"Entry #{index} is not an object")
    missing = [key for key in ("id", "title", "date", "content") if key not in raw]
    if missing:
        raise ContentLoadError(
            f"Entry #{index} is missing field(s): {', '.join(missing)}"
        )
    tags = raw.get("tags") or []
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ContentLoadError(f"Entry #{index} has invalid tags")
    return ContentEntry(
        id=str(raw["id"]),
        title=str(raw["title"]),
        date=str(raw["date"]),
        content=str(raw["content"]),
        tags=tuple(tags),
    )


def load_content(path: Path) -> StaticContentStore:
    """
    Load entries from a JSON file.

    The document is either a list of entry objects or an object with an
    "entries" list. Each entry needs id, title, date and content; tags is
    an optional list of strings.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ContentLoadError(f"Cannot read content file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ContentLoadError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("entries")
    if not isinstance(data, list):
        raise ContentLoadError(f"{path} must contain a list of entries")

    entries = [_entry_from_dict(raw, i) for i, raw in enumerate(data, start=1)]
    for entry in entries:
        # Submitted lines are upper-cased before dispatch, so READ can only
        # ever ask for the upper-cased form of an id.
        if entry.id != entry.id.upper():
            logger.warning(
                "Entry id %r is not upper-case; READ cannot reach it", entry.id
            )
    logger.info("Loaded %d entries from %s", len(entries), path)
    return StaticContentStore(entries)
