from fastapi import APIRouter

from resume_analyzer.reference import get_role_registry

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the analyzer.")
async def health_check():
    return {"status": "healthy", "roles": len(get_role_registry().roles())}
