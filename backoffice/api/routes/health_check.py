from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from backoffice.adapter.database import Database
from backoffice.depends import get_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(request: Request, database: Database = Depends(get_database)):
    """Liveness plus a round trip to the credential store"""
    timestamp = datetime.now(UTC).isoformat()

    if await database.ping():
        return {
            "status": "healthy",
            "timestamp": timestamp,
            "database": "connected",
            "version": request.app.version,
        }

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "unhealthy",
            "timestamp": timestamp,
            "database": "disconnected",
            "version": request.app.version,
        },
    )
