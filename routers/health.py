# routers/health.py

from fastapi import APIRouter
from core.database import mongo

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/db
# Pings MongoDB (connects lazily if needed)
# -----------------------------------------------------
@router.get("/db", summary="MongoDB health check")
def health_db():
    status = mongo.ping()
    return {
        "service": "MongoDB",
        "status": status.get("status", "unknown"),
        "details": status,
    }


# -----------------------------------------------------
# GET /health/app
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    """
    Lightweight health check for uptime monitors.
    """
    return {
        "service": "Fee Portal API",
        "status": "ok",
    }
