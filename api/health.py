"""
Health check API routes
"""
from fastapi import APIRouter, Depends
import time
from datetime import datetime

from api.dependencies import get_services
from configs.settings import settings
from services import Services

router = APIRouter()

@router.get("")
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "timestamp": datetime.now().isoformat()
    }

@router.get("/detailed")
async def detailed_health_check(services: Services = Depends(get_services)):
    """Health check including entity store sizes"""
    start_time = time.time()
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "timestamp": datetime.now().isoformat(),
        "checks": {
            "store": {
                "status": "healthy",
                "details": {
                    "collections": services.store.sizes(),
                    "storage_type": "in_memory"
                }
            }
        },
        "response_time_ms": round((time.time() - start_time) * 1000, 2)
    }

@router.get("/liveness")
async def liveness_check():
    """Liveness check - for K8s liveness probe"""
    return {
        "status": "alive",
        "service": settings.app_name,
        "timestamp": datetime.now().isoformat()
    }
