"""Status endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ...models.status import ServiceStatus

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status", response_class=PlainTextResponse, summary="Service Status")
async def get_status() -> str:
    """Report that the service is up with the plain-text body `UP`."""
    return ServiceStatus.UP.value
