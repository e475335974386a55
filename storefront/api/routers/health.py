# storefront/api/routers/health.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.database import get_db, ping
from storefront.domain.schemas import HealthOut
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(db: Session = Depends(get_db)):
    try:
        ping(db)
    except SQLAlchemyError as e:
        logger.warning(f"Health check: database unreachable: {e}")
        return JSONResponse(status_code=503, content={"status": "degraded", "database": "down"})
    return HealthOut(status="ok", database="up")
