"""Business logic for entry registration and lookup."""

import logging
from collections import Counter

from buildplan.context import ServerContext
from buildplan.errors import (
    DuplicateRequiredResourceError,
    InvalidEntryTypeError,
    NameCollisionError,
    NegativeBuildTimeError,
)
from buildplan.models.entry import Entry, ProjectEntry, ResourceEntry

logger = logging.getLogger(__name__)


def find_duplicate_references(project: ProjectEntry) -> list[str]:
    """Names that appear more than once in a project's required resources."""
    counts = Counter(ref.name for ref in project.required_resources)
    return [name for name, count in counts.items() if count > 1]


class RegistryService:
    """Validates entries and stores them under their names.

    Checks run in a fixed order and the first failure wins: entry type,
    resource build time, project duplicate references, then name collision.
    A rejected entry leaves the store untouched.
    """

    def __init__(self, ctx: ServerContext) -> None:
        """Create RegistryService with server context.

        Args:
            ctx: Server context with injected dependencies
        """
        self._ctx = ctx

    def register(self, entry: Entry) -> None:
        """Register a new entry.

        Args:
            entry: ResourceEntry or ProjectEntry to register

        Raises:
            InvalidEntryTypeError: If entry is neither a resource nor a project
            NegativeBuildTimeError: If a resource has build_time < 0
            DuplicateRequiredResourceError: If a project references a name twice
            NameCollisionError: If the name is already registered
        """
        if isinstance(entry, ResourceEntry):
            if entry.build_time < 0:
                logger.debug("Rejected resource %r: negative build time %s", entry.name, entry.build_time)
                raise NegativeBuildTimeError(entry.name)
        elif isinstance(entry, ProjectEntry):
            duplicates = find_duplicate_references(entry)
            if duplicates:
                logger.debug("Rejected project %r: duplicate references %s", entry.name, duplicates)
                raise DuplicateRequiredResourceError(entry.name, duplicates)
        else:
            raise InvalidEntryTypeError(getattr(entry, "type", type(entry).__name__))

        if not self._ctx.entry_store.insert(entry):
            logger.debug("Rejected %s %r: name already registered", entry.type.value, entry.name)
            raise NameCollisionError(entry.name)

        logger.info("Registered %s %r", entry.type.value, entry.name)

    def lookup(self, name: str) -> Entry | None:
        """Get an entry by name.

        Args:
            name: Entry name

        Returns:
            Entry if registered, None otherwise
        """
        return self._ctx.entry_store.get(name)

    def list_entries(self) -> list[Entry]:
        """List all entries in registration order."""
        return self._ctx.entry_store.list_entries()
