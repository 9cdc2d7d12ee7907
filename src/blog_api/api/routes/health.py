"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException

from blog_api.api.dependencies import get_post_store
from blog_api.services.errors import StoreError

router = APIRouter()


@router.get("/health")
async def health_check(store=Depends(get_post_store)):
    """Report service health, including store connectivity"""
    try:
        await store.count()
    except StoreError as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected"
    }
