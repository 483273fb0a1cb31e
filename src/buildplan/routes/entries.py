"""HTTP route handlers for entry registration and project summaries."""

from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from buildplan.models.entry import Number, Summary
from buildplan.models.payload import parse_entry
from buildplan.services.registry_service import RegistryService
from buildplan.services.resolver import SummaryService

router = APIRouter(tags=["entries"])


class SuccessResponse(BaseModel):
    """Response body for a successful registration."""

    success: bool = True


class ResourceLineResponse(BaseModel):
    """One flattened leaf resource."""

    name: str
    quantity: Number


class SummaryResponse(BaseModel):
    """Response body for a project summary."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    build_time: Number = Field(alias="buildTime")
    resources: list[ResourceLineResponse]

    @classmethod
    def from_summary(cls, summary: Summary) -> "SummaryResponse":
        """Create response from Summary model."""
        return cls(
            name=summary.name,
            build_time=summary.build_time,
            resources=[
                ResourceLineResponse(name=line.name, quantity=line.quantity)
                for line in summary.resources
            ],
        )


def get_registry_service(request: Request) -> RegistryService:
    """Get RegistryService from request state."""
    return request.app.state.registry_service


def get_summary_service(request: Request) -> SummaryService:
    """Get SummaryService from request state."""
    return request.app.state.summary_service


@router.post("/projectEntry", response_model=SuccessResponse)
async def create_entry(request: Request, payload: Any = Body(default=None)) -> SuccessResponse:
    """Register a resource or project.

    Registration errors are turned into 400 responses by the handler
    installed in create_app().
    """
    service = get_registry_service(request)
    service.register(parse_entry(payload))
    return SuccessResponse()


@router.get("/projectEntry")
async def get_entry(request: Request, name: str = "") -> Any:
    """Get a registered entry in the shape it was posted."""
    service = get_registry_service(request)
    entry = service.lookup(name)
    if entry is None:
        return JSONResponse(
            status_code=404,
            content={"success": False, "message": f"entry named {name} was not found"},
        )
    return entry.to_dict()


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(request: Request, name: str = "") -> SummaryResponse:
    """Summarize a project's flattened resources and total build time."""
    service = get_summary_service(request)
    return SummaryResponse.from_summary(service.summarize(name))
