"""Tests for parsing entry payloads."""

import pytest
from buildplan.errors import InvalidEntryTypeError, MalformedEntryError
from buildplan.models.entry import EntryType, ProjectEntry, RequiredResource, ResourceEntry
from buildplan.models.payload import parse_entry

from tests.test_utils.entry_builders import project_payload, resource_payload


class TestParseResource:
    """Tests for resource payloads."""

    def test_parses_resource(self) -> None:
        """A resource payload becomes a ResourceEntry."""
        entry = parse_entry(resource_payload("wood", 2))

        assert entry == ResourceEntry(name="wood", build_time=2)
        assert entry.type is EntryType.RESOURCE

    def test_integer_build_time_stays_int(self) -> None:
        """Integers are not widened to floats."""
        entry = parse_entry(resource_payload("wood", 2))

        assert isinstance(entry, ResourceEntry)
        assert isinstance(entry.build_time, int)

    def test_negative_build_time_is_left_to_registry(self) -> None:
        """Parsing only checks shape; value rules belong to registration."""
        entry = parse_entry(resource_payload("wood", -1))

        assert entry == ResourceEntry(name="wood", build_time=-1)

    def test_missing_build_time_is_malformed(self) -> None:
        """A resource without buildTime is rejected with the field name."""
        with pytest.raises(MalformedEntryError) as exc_info:
            parse_entry({"type": "resource", "name": "wood"})

        assert "buildTime" in exc_info.value.message

    @pytest.mark.parametrize(
        "build_time", [float("nan"), float("inf"), 10**400, -(10**400), True, "soon", "5", "inf"]
    )
    def test_non_numeric_or_non_finite_build_time_is_malformed(self, build_time: object) -> None:
        """Booleans, strings and numbers outside the float range are not build times."""
        with pytest.raises(MalformedEntryError):
            parse_entry(resource_payload("wood", build_time))

    def test_float_build_time_is_kept(self) -> None:
        """Fractional build times parse as floats."""
        entry = parse_entry(resource_payload("wood", 0.5))

        assert entry == ResourceEntry(name="wood", build_time=0.5)


class TestParseProject:
    """Tests for project payloads."""

    def test_parses_project_preserving_order(self) -> None:
        """Required resources keep their declared order."""
        entry = parse_entry(project_payload("table", ("wood", 4), ("nail", 8)))

        assert entry == ProjectEntry(
            name="table",
            required_resources=(
                RequiredResource(name="wood", quantity=4),
                RequiredResource(name="nail", quantity=8),
            ),
        )

    def test_duplicates_are_left_to_registry(self) -> None:
        """Duplicate references parse; the registry rejects them."""
        entry = parse_entry(project_payload("table", ("wood", 4), ("wood", 1)))

        assert isinstance(entry, ProjectEntry)
        assert len(entry.required_resources) == 2

    def test_missing_required_resources_is_malformed(self) -> None:
        """A project without requiredResources is rejected."""
        with pytest.raises(MalformedEntryError) as exc_info:
            parse_entry({"type": "project", "name": "table"})

        assert "requiredResources" in exc_info.value.message

    @pytest.mark.parametrize("quantity", [float("inf"), float("nan"), 10**400, "4", False])
    def test_non_finite_or_non_numeric_quantity_is_malformed(self, quantity: object) -> None:
        """Quantities must be finite numbers, not strings or booleans."""
        with pytest.raises(MalformedEntryError) as exc_info:
            parse_entry(project_payload("table", ("wood", quantity)))

        assert "quantity" in exc_info.value.message

    def test_zero_and_negative_quantities_are_accepted(self) -> None:
        """Quantity sign is not validated."""
        entry = parse_entry(project_payload("table", ("wood", 0), ("nail", -2)))

        assert isinstance(entry, ProjectEntry)
        assert [ref.quantity for ref in entry.required_resources] == [0, -2]


class TestParseType:
    """Tests for the type tag."""

    @pytest.mark.parametrize("entry_type", ["widget", "Resource", "", 3, None])
    def test_unknown_type_is_invalid(self, entry_type: object) -> None:
        """Anything but "resource" or "project" is an invalid type."""
        payload = {"type": entry_type, "name": "x", "buildTime": 1}

        with pytest.raises(InvalidEntryTypeError) as exc_info:
            parse_entry(payload)

        assert exc_info.value.entry_type == entry_type

    def test_type_checked_before_shape(self) -> None:
        """An unknown type wins over a missing name."""
        with pytest.raises(InvalidEntryTypeError):
            parse_entry({"type": "widget"})

    def test_missing_type_is_invalid(self) -> None:
        """A payload without a type tag is an invalid type."""
        with pytest.raises(InvalidEntryTypeError):
            parse_entry({"name": "wood", "buildTime": 2})

    @pytest.mark.parametrize("payload", [None, [], "wood", 42])
    def test_non_object_is_malformed(self, payload: object) -> None:
        """Payloads must be JSON objects."""
        with pytest.raises(MalformedEntryError):
            parse_entry(payload)
