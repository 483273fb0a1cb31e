"""Entry, required-resource and summary data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Number = int | float


class EntryType(str, Enum):
    """Discriminator for the two kinds of registry entry."""

    RESOURCE = "resource"
    PROJECT = "project"


@dataclass(frozen=True)
class RequiredResource:
    """A weak reference by name from a project to another entry."""

    name: str
    quantity: Number


@dataclass(frozen=True)
class ResourceEntry:
    """A leaf entry with an intrinsic build time."""

    name: str
    build_time: Number
    type: EntryType = field(default=EntryType.RESOURCE, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the camelCase shape accepted by POST /projectEntry."""
        return {"type": self.type.value, "name": self.name, "buildTime": self.build_time}


@dataclass(frozen=True)
class ProjectEntry:
    """A composite entry built from other entries.

    required_resources keeps the order the references were declared in;
    expansion walks them in that order.
    """

    name: str
    required_resources: tuple[RequiredResource, ...]
    type: EntryType = field(default=EntryType.PROJECT, init=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the camelCase shape accepted by POST /projectEntry."""
        return {
            "type": self.type.value,
            "name": self.name,
            "requiredResources": [
                {"name": ref.name, "quantity": ref.quantity} for ref in self.required_resources
            ],
        }


Entry = ResourceEntry | ProjectEntry


@dataclass(frozen=True)
class ResourceLine:
    """One leaf occurrence in a flattened summary."""

    name: str
    quantity: Number


@dataclass(frozen=True)
class Summary:
    """Flattened leaf resources and aggregate build time for a project."""

    name: str
    build_time: Number
    resources: tuple[ResourceLine, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "buildTime": self.build_time,
            "resources": [{"name": line.name, "quantity": line.quantity} for line in self.resources],
        }
