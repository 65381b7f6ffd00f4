"""
Sales statistics for the dashboard: today's counters and the daily
revenue / COGS / profit summary of the last few days.
"""

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta, tzinfo
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List

from sqlalchemy import select, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.common.dates import start_of_day, end_of_day, today_in
from backoffice.common.services import AppService, ZERO
from backoffice.sales.models import Sale, SaleItem
from backoffice.sales.schemas import SalesStats, DailySalesSummary

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


class SalesStatsService(AppService):

    def __init__(self, session: AsyncSession, tz: tzinfo, summary_days: int = 5):
        super().__init__(session)
        self.tz = tz
        self.summary_days = summary_days

    async def get_today_stats(self, today: date | None = None) -> SalesStats:
        """
        Sum and count the sales registered today (in the reporting time zone).

        Args:
            today: Day to report; defaults to the current date

        Returns:
            SalesStats with zeros when nothing was sold
        """
        failure = "Failed to fetch sales stats"
        today = today or today_in(self.tz)

        stmt = (
            select(
                func.sum(Sale.total_amount).label("total_sales_amount"),
                func.count(Sale.id).label("total_sales_count"),
            )
            .where(
                and_(
                    Sale.date >= start_of_day(today, self.tz),
                    Sale.date <= end_of_day(today, self.tz),
                )
            )
        )
        result = await self._execute(stmt, failure)
        row = result.one()

        return SalesStats(
            total_sales_amount=self._decimal(row.total_sales_amount, failure),
            total_sales_count=self._int(row.total_sales_count, failure),
        )

    async def get_daily_summary(self, today: date | None = None) -> List[DailySalesSummary]:
        """
        Build the revenue / COGS / profit series for the last ``summary_days``
        days, oldest first. Days without sales are reported with zeros.

        Args:
            today: Last day of the series; defaults to the current date

        Returns:
            One DailySalesSummary per day, values rounded to cents
        """
        failure = "Failed to fetch daily sales summary"
        today = today or today_in(self.tz)
        first_day = today - timedelta(days=self.summary_days - 1)
        in_range = and_(
            Sale.date >= start_of_day(first_day, self.tz),
            Sale.date <= end_of_day(today, self.tz),
        )

        logger.info(f"Generating daily sales summary: {first_day} .. {today}")

        sales_stmt = select(Sale.id, Sale.date, Sale.total_amount).where(in_range)
        sales_result = await self._execute(sales_stmt, failure)
        sales_rows = sales_result.all()

        cogs_stmt = (
            select(
                SaleItem.sale_id,
                func.sum(SaleItem.quantity * SaleItem.cost_price).label("cogs"),
            )
            .select_from(SaleItem)
            .join(Sale, SaleItem.sale_id == Sale.id)
            .where(in_range)
            .group_by(SaleItem.sale_id)
        )
        cogs_result = await self._execute(cogs_stmt, failure)
        cogs_by_sale: Dict[str, Decimal] = {
            row.sale_id: self._decimal(row.cogs, failure) for row in cogs_result.all()
        }

        revenue_by_day: Dict[date, Decimal] = defaultdict(lambda: ZERO)
        cogs_by_day: Dict[date, Decimal] = defaultdict(lambda: ZERO)
        for row in sales_rows:
            day = self._local_date(row.date)
            revenue_by_day[day] += self._decimal(row.total_amount, failure)
            cogs_by_day[day] += cogs_by_sale.get(row.id, ZERO)

        summaries: List[DailySalesSummary] = []
        current_date = first_day
        for _ in range(self.summary_days):
            revenue = revenue_by_day[current_date]
            cogs = cogs_by_day[current_date]
            summaries.append(DailySalesSummary(
                date=f"{current_date:%b} {current_date.day}",
                name=f"{current_date:%a}",
                revenue=_round_cents(revenue),
                cogs=_round_cents(cogs),
                profit=_round_cents(revenue - cogs),
            ))
            current_date += timedelta(days=1)

        return summaries

    def _local_date(self, value: datetime) -> date:
        # Naive timestamps (SQLite) are already wall-clock time in the reporting zone
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(self.tz).date()


def _round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
