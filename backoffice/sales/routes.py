from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from backoffice.common.dates import get_zone
from backoffice.deps import SessionDependency, SettingsDependency
from backoffice.sales.schemas import SalesStats, DailySalesSummary
from backoffice.sales.services import SalesStatsService

router = APIRouter()

async def get_sales_stats_service(session: SessionDependency, settings: SettingsDependency) -> SalesStatsService:
    return SalesStatsService(
        session,
        tz=get_zone(settings.REPORT_TIMEZONE),
        summary_days=settings.DAILY_SUMMARY_DAYS,
    )

ServiceDependency = Annotated[SalesStatsService, Depends(get_sales_stats_service)]

@router.get("/stats", response_model=SalesStats, status_code=status.HTTP_200_OK, summary="Get today's sales totals")
async def get_sales_stats(service: ServiceDependency):
    return await service.get_today_stats()

@router.get("/stats/daily-summary", response_model=List[DailySalesSummary], status_code=status.HTTP_200_OK, summary="Get the daily sales summary", description="Revenue, cost of goods sold and profit for today and the previous days, oldest first.")
async def get_daily_sales_summary(service: ServiceDependency):
    return await service.get_daily_summary()
