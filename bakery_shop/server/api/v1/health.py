"""
Liveness and version endpoints of the bakery API.

Neither needs credentials, so load balancers and deploy scripts can poll
them.
"""

from fastapi import APIRouter

from bakery_shop.server.core import constant

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report that the bakery API process is up and serving requests.",
    response_description="Status object.",
)
async def health_check():
    """Answers ``{"status": "ok"}`` without touching the database."""
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Release of the bakery backend and the API schema it serves.",
    response_description="Version object.",
)
async def version():
    return {"version": constant.API_VERSION, "schema_version": "v1"}
