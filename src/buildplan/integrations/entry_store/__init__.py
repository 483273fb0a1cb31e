"""Entry storage integration."""

from buildplan.integrations.entry_store.abc import EntryStore
from buildplan.integrations.entry_store.fake import FakeEntryStore
from buildplan.integrations.entry_store.memory import InMemoryEntryStore

__all__ = ["EntryStore", "FakeEntryStore", "InMemoryEntryStore"]
