"""Data models for buildplan."""

from buildplan.models.entry import (
    Entry,
    EntryType,
    ProjectEntry,
    RequiredResource,
    ResourceEntry,
    ResourceLine,
    Summary,
)

__all__ = [
    "Entry",
    "EntryType",
    "ProjectEntry",
    "RequiredResource",
    "ResourceEntry",
    "ResourceLine",
    "Summary",
]
