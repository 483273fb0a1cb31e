"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator

import pytest
from buildplan.context import ServerContext
from buildplan.integrations.entry_store.fake import FakeEntryStore
from buildplan.main import create_app
from buildplan.models.entry import ProjectEntry, ResourceEntry
from buildplan.services.registry_service import RegistryService
from buildplan.services.resolver import SummaryService
from httpx import ASGITransport, AsyncClient

from tests.test_utils.entry_builders import make_project, make_resource


@pytest.fixture
def fake_entry_store() -> FakeEntryStore:
    """Create a fresh FakeEntryStore."""
    return FakeEntryStore()


@pytest.fixture
def server_context(fake_entry_store: FakeEntryStore) -> ServerContext:
    """Create a ServerContext with fake implementations."""
    return ServerContext(entry_store=fake_entry_store)


@pytest.fixture
def registry_service(server_context: ServerContext) -> RegistryService:
    """Create a RegistryService with fake context."""
    return RegistryService(server_context)


@pytest.fixture
def summary_service(server_context: ServerContext) -> SummaryService:
    """Create a SummaryService with fake context."""
    return SummaryService(server_context)


@pytest.fixture
def furniture_entries() -> list[ResourceEntry | ProjectEntry]:
    """Wood and nails, a table built from them, and a chair built from tables."""
    return [
        make_resource("wood", 2),
        make_resource("nail", 1),
        make_project("table", ("wood", 4), ("nail", 8)),
        make_project("chair", ("table", 2)),
    ]


@pytest.fixture
async def async_client(server_context: ServerContext) -> AsyncIterator[AsyncClient]:
    """Create an async test client over the fake context."""
    app = create_app(context=server_context)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
