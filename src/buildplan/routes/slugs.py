"""HTTP route handler for slug title-casing."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from buildplan.slugs import slug_to_title

router = APIRouter(tags=["slugs"])


@router.get("/slugToTitle", response_class=PlainTextResponse)
async def get_slug_title(slug: str = "") -> str:
    """Title-case a slug; 200 with an empty body when there is nothing to convert."""
    return slug_to_title(slug)
