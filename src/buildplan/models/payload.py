"""Tagged-union parsing of untrusted entry payloads.

Payloads arrive as JSON objects (HTTP body, entries file). The ``type`` tag is
checked first so an unknown type is always reported as such, then the variant's
shape is validated with pydantic and converted to the frozen domain model.
Value rules such as non-negative build times are enforced by the registry,
not here.
"""

import math
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError, field_validator

from buildplan.errors import InvalidEntryTypeError, MalformedEntryError
from buildplan.models.entry import (
    Entry,
    EntryType,
    Number,
    ProjectEntry,
    RequiredResource,
    ResourceEntry,
)

# Numeric strings such as "5" are not coerced
StrictNumber = StrictInt | StrictFloat


def _reject_bool(value: object) -> object:
    # bool is an int subclass; reject it before pydantic sees it
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


def _require_finite(value: Number) -> Number:
    # math.isfinite raises OverflowError for ints beyond the float range
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite:
        raise ValueError("must be a finite number")
    return value


class RequiredResourcePayload(BaseModel):
    """One ``{"name", "quantity"}`` item of a project's requiredResources."""

    name: str
    quantity: StrictNumber

    @field_validator("quantity", mode="before")
    @classmethod
    def check_quantity_type(cls, value: object) -> object:
        return _reject_bool(value)

    @field_validator("quantity")
    @classmethod
    def check_quantity_finite(cls, value: Number) -> Number:
        return _require_finite(value)


class ResourcePayload(BaseModel):
    """Body shape for ``{"type": "resource", ...}``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    build_time: StrictNumber = Field(alias="buildTime")

    @field_validator("build_time", mode="before")
    @classmethod
    def check_build_time_type(cls, value: object) -> object:
        return _reject_bool(value)

    @field_validator("build_time")
    @classmethod
    def check_build_time_finite(cls, value: Number) -> Number:
        return _require_finite(value)

    def to_entry(self) -> ResourceEntry:
        return ResourceEntry(name=self.name, build_time=self.build_time)


class ProjectPayload(BaseModel):
    """Body shape for ``{"type": "project", ...}``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    required_resources: list[RequiredResourcePayload] = Field(alias="requiredResources")

    def to_entry(self) -> ProjectEntry:
        return ProjectEntry(
            name=self.name,
            required_resources=tuple(
                RequiredResource(name=item.name, quantity=item.quantity)
                for item in self.required_resources
            ),
        )


_PAYLOAD_MODELS: dict[str, type[ResourcePayload] | type[ProjectPayload]] = {
    EntryType.RESOURCE.value: ResourcePayload,
    EntryType.PROJECT.value: ProjectPayload,
}


def _describe(err: ValidationError) -> str:
    parts = []
    for error in err.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def parse_entry(payload: object) -> Entry:
    """Parse a JSON-like payload into an Entry.

    Args:
        payload: Decoded JSON value, expected to be an object with a ``type`` tag

    Returns:
        ResourceEntry or ProjectEntry

    Raises:
        InvalidEntryTypeError: If ``type`` is missing or not a known tag
        MalformedEntryError: If the payload is not an object or has the wrong shape
    """
    if not isinstance(payload, Mapping):
        raise MalformedEntryError(f"expected a JSON object, got {type(payload).__name__}")

    entry_type = payload.get("type")
    model = _PAYLOAD_MODELS.get(entry_type) if isinstance(entry_type, str) else None
    if model is None:
        raise InvalidEntryTypeError(entry_type)

    try:
        parsed = model.model_validate(dict(payload))
    except ValidationError as err:
        raise MalformedEntryError(_describe(err)) from err
    return parsed.to_entry()
