from datetime import datetime, timezone
from typing import Any, Dict

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ....config import get_settings
from ....core.database import get_db

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    settings = get_settings()
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database health check failed", error=str(e))
        return JSONResponse(
            status_code=503,
            content={
                "error": "Database connectivity failed",
                "status": "unhealthy",
                "database": "unhealthy",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

    return {
        "status": "healthy",
        "service": "Newsdesk API",
        "version": "0.1.0",
        "environment": "development" if settings.debug else "production",
        "database": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
