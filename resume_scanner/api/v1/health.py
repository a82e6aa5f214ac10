from fastapi import APIRouter

from resume_scanner.core.config import settings

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and the configured asset store.")
async def health_check():
    return {"status": "healthy", "asset_store": settings.asset_store_backend}
