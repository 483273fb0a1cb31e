"""Process-lifetime in-memory entry store."""

import threading
from collections.abc import Mapping

from buildplan.integrations.entry_store.abc import EntryStore
from buildplan.models.entry import Entry


class InMemoryEntryStore(EntryStore):
    """Production entry store backed by a dict.

    Created empty when the application context is built and discarded with
    the process. A single lock is held for the duration of every operation,
    so readers never see a half-inserted entry.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Entry | None:
        """Get entry by name."""
        with self._lock:
            return self._entries.get(name)

    def insert(self, entry: Entry) -> bool:
        """Insert entry if the name is free."""
        with self._lock:
            if entry.name in self._entries:
                return False
            self._entries[entry.name] = entry
            return True

    def snapshot(self) -> Mapping[str, Entry]:
        """Copy the registry under the lock."""
        with self._lock:
            return dict(self._entries)

    def list_entries(self) -> list[Entry]:
        """List entries in insertion order."""
        with self._lock:
            return list(self._entries.values())
