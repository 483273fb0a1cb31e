"""Abstract base class for entry storage."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from buildplan.models.entry import Entry


class EntryStore(ABC):
    """Abstract interface for the name -> entry registry storage.

    Implementations include:
    - InMemoryEntryStore: lock-guarded dict for the running service
    - FakeEntryStore: in-memory with call recording for testing

    Entries are immutable; there is no update or delete.
    """

    @abstractmethod
    def get(self, name: str) -> Entry | None:
        """Get an entry by name.

        Args:
            name: Entry name

        Returns:
            The Entry if registered, None otherwise
        """
        ...

    @abstractmethod
    def insert(self, entry: Entry) -> bool:
        """Insert an entry unless its name is taken.

        The existence check and the insert are a single atomic step.

        Args:
            entry: Entry to store under entry.name

        Returns:
            True if inserted, False if the name already existed
        """
        ...

    @abstractmethod
    def snapshot(self) -> Mapping[str, Entry]:
        """Get a consistent copy of the whole registry.

        Returns:
            Mapping of name -> Entry that later inserts do not affect
        """
        ...

    @abstractmethod
    def list_entries(self) -> list[Entry]:
        """List all entries.

        Returns:
            Entries in registration order
        """
        ...
