"""GET /api/dashboard/stats -- summary counts and averages for the dashboard."""

from fastapi import APIRouter, Depends

from proxmon.database import get_db
from proxmon.schemas.dashboard import DashboardStats
from proxmon.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _service(session=Depends(get_db)) -> DashboardService:
    return DashboardService(session)


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(svc: DashboardService = Depends(_service)) -> DashboardStats:
    return await svc.get_stats()
