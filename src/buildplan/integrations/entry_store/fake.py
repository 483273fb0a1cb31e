"""Fake in-memory entry store for testing."""

from collections.abc import Mapping

from buildplan.integrations.entry_store.abc import EntryStore
from buildplan.models.entry import Entry


class FakeEntryStore(EntryStore):
    """In-memory fake implementation for testing.

    This class tracks all operations for test assertions.
    State is provided via constructor or captured during execution.
    """

    def __init__(self, entries: list[Entry] | None = None) -> None:
        """Create FakeEntryStore.

        Args:
            entries: Optional initial entries, stored under their names in order
        """
        self._entries: dict[str, Entry] = {entry.name: entry for entry in entries or []}
        self._insert_calls: list[Entry] = []
        self._snapshot_count = 0

    @property
    def entries(self) -> dict[str, Entry]:
        """Get current entries for test assertions."""
        return self._entries.copy()

    @property
    def insert_calls(self) -> list[Entry]:
        """Every entry passed to insert(), accepted or not."""
        return self._insert_calls.copy()

    @property
    def snapshot_count(self) -> int:
        """Number of snapshot() calls."""
        return self._snapshot_count

    def get(self, name: str) -> Entry | None:
        """Get entry by name from memory."""
        return self._entries.get(name)

    def insert(self, entry: Entry) -> bool:
        """Insert entry in memory if the name is free."""
        self._insert_calls.append(entry)
        if entry.name in self._entries:
            return False
        self._entries[entry.name] = entry
        return True

    def snapshot(self) -> Mapping[str, Entry]:
        """Copy entries from memory."""
        self._snapshot_count += 1
        return dict(self._entries)

    def list_entries(self) -> list[Entry]:
        """List entries in insertion order."""
        return list(self._entries.values())
