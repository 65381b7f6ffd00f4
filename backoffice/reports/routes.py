"""
HTTP routes for financial reports endpoints.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, status

from backoffice.common.dates import get_zone, parse_date_range
from backoffice.deps import SessionDependency, SettingsDependency
from backoffice.reports.schemas import BalanceSheetReport, ProfitLossReport, TopSellingProduct
from backoffice.reports.services import ReportService

router = APIRouter()


async def get_report_service(session: SessionDependency, settings: SettingsDependency) -> ReportService:
    """
    Dependency to get ReportService instance.

    Args:
        session: Database session
        settings: Application settings (reporting time zone, list limits)

    Returns:
        ReportService instance
    """
    return ReportService(
        session,
        tz=get_zone(settings.REPORT_TIMEZONE),
        top_selling_limit=settings.TOP_SELLING_PRODUCTS_LIMIT,
    )


ServiceDependency = Annotated[ReportService, Depends(get_report_service)]


@router.get(
    "/profit-loss",
    response_model=ProfitLossReport,
    status_code=status.HTTP_200_OK,
    summary="Get profit & loss report",
    description="Returns revenue, cost of goods sold, gross profit, expenses by category, total expenses and net profit for an inclusive date range."
)
async def get_profit_loss_report(
    service: ServiceDependency,
    start_date: Optional[str] = Query(
        None,
        alias="startDate",
        description="First day of the period (YYYY-MM-DD)"
    ),
    end_date: Optional[str] = Query(
        None,
        alias="endDate",
        description="Last day of the period (YYYY-MM-DD)"
    )
) -> ProfitLossReport:
    """
    Get profit & loss report.

    The parameters are read as plain strings and validated here so that a
    missing or malformed date answers 400 with a ``message`` body before the
    database is touched.

    Raises:
        MissingParameterError: If startDate or endDate is missing (400)
        InvalidDateError: If startDate or endDate is not a valid date (400)
        DataAccessError: If the database cannot be read (500)
    """
    start, end = parse_date_range(start_date, end_date)
    return await service.get_profit_loss_report(start, end)


@router.get(
    "/top-selling-products",
    response_model=List[TopSellingProduct],
    status_code=status.HTTP_200_OK,
    summary="Get top selling products",
    description="Returns the best selling products ordered by units sold."
)
async def get_top_selling_products(service: ServiceDependency) -> List[TopSellingProduct]:
    return await service.get_top_selling_products()


@router.get(
    "/balance-sheet",
    response_model=BalanceSheetReport,
    status_code=status.HTTP_200_OK,
    summary="Get balance sheet",
    description="Returns a snapshot of inventory value, accounts receivable and accounts payable as of today."
)
async def get_balance_sheet(service: ServiceDependency) -> BalanceSheetReport:
    return await service.get_balance_sheet()
