"""Error hierarchy for registration and resolution.

Every error carries a human-readable ``message``; the HTTP layer returns it
verbatim in a 400 response and the CLI prints it.
"""

from collections.abc import Sequence


class RegistrationError(Exception):
    """Raised when an entry cannot be registered."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidEntryTypeError(RegistrationError):
    """Raised when an entry's type is neither "resource" nor "project"."""

    def __init__(self, entry_type: object) -> None:
        self.entry_type = entry_type
        super().__init__(
            f'type "{entry_type}" is not a valid type only "resource" or "project" are accepted'
        )


class MalformedEntryError(RegistrationError):
    """Raised when a payload has a valid type but the wrong shape."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"malformed entry: {reason}")


class NegativeBuildTimeError(RegistrationError):
    """Raised when a resource declares a build time below zero."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"resource {name} has negative build time")


class DuplicateRequiredResourceError(RegistrationError):
    """Raised when a project lists the same reference more than once."""

    def __init__(self, name: str, duplicates: Sequence[str]) -> None:
        self.name = name
        self.duplicates = list(duplicates)
        super().__init__(
            f"project {name} has duplicate names in required resources: {', '.join(self.duplicates)}"
        )


class NameCollisionError(RegistrationError):
    """Raised when the entry name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"the name {name} already exists in the project registry")


class ResolveError(Exception):
    """Raised when a project summary cannot be produced."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ProjectNotFoundError(ResolveError):
    """Raised when the requested name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"project named {name} was not found")


class NotAProjectError(ResolveError):
    """Raised when the requested name is a resource."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} refers to a 'resource' and not a 'project'")


class DanglingDependencyError(ResolveError):
    """Raised when expansion finds no leaf resource at all.

    This is an approximate signal: it fires only when every branch resolved
    to nothing. ``missing`` lists the unknown references seen on the way.
    """

    def __init__(self, name: str, missing: Sequence[str]) -> None:
        self.name = name
        self.missing = list(missing)
        message = "non-existent dependency found"
        if self.missing:
            message = f"{message}: {', '.join(self.missing)}"
        super().__init__(message)


class CyclicDependencyError(ResolveError):
    """Raised when a project transitively requires itself."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(f"cyclic dependency detected: {' -> '.join(self.cycle)}")


class BuildTimeOverflowError(ResolveError):
    """Raised when a quantity or build time leaves the finite number range."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"build time of project {name} is too large to compute")
