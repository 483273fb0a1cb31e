"""Server context for dependency injection."""

from dataclasses import dataclass

from buildplan.integrations.entry_store.abc import EntryStore
from buildplan.integrations.entry_store.fake import FakeEntryStore
from buildplan.integrations.entry_store.memory import InMemoryEntryStore
from buildplan.models.entry import Entry


@dataclass(frozen=True)
class ServerContext:
    """Server context containing all dependencies.

    This is a frozen dataclass that holds all injected dependencies
    for the server. Use for_test() for testing scenarios.
    """

    entry_store: EntryStore

    @classmethod
    def create(cls) -> "ServerContext":
        """Create a production context with an empty in-memory store."""
        return cls(entry_store=InMemoryEntryStore())

    @classmethod
    def for_test(cls, *, entries: list[Entry] | None = None) -> "ServerContext":
        """Create a test context with fake implementations.

        Args:
            entries: Pre-registered entries for FakeEntryStore

        Returns:
            ServerContext with fake implementations
        """
        return cls(entry_store=FakeEntryStore(entries=entries))
