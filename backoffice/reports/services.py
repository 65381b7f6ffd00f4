"""
Report service for financial reports.

This service aggregates sales, sale items and daily expenses into the
Profit & Loss report. Sale items and products feed the top-selling
ranking; products, customers and purchase invoices feed the balance sheet.
"""

import logging
from datetime import date, tzinfo
from decimal import Decimal
from typing import List

from sqlalchemy import select, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.common.dates import start_of_day, end_of_day, today_in
from backoffice.common.services import AppService, ZERO
from backoffice.customers.models import Customer
from backoffice.expenses.models import DailyExpense
from backoffice.products.models import Product
from backoffice.purchases.models import PurchaseInvoice
from backoffice.reports.schemas import (
    ProfitLossReport,
    ExpenseCategoryTotal,
    TopSellingProduct,
    BalanceSheetReport,
    BalanceSheetAssets,
    BalanceSheetLiabilities,
)
from backoffice.sales.models import Sale, SaleItem

logger = logging.getLogger(__name__)

PROFIT_LOSS_FAILURE = "Failed to fetch Profit & Loss data"
TOP_SELLING_FAILURE = "Failed to fetch top selling products"
BALANCE_SHEET_FAILURE = "Failed to fetch Balance Sheet data"


class ReportService(AppService):
    """
    Service for generating financial reports.

    Every report is a pure read: the service never writes, and two calls with
    the same arguments against unchanged data return identical reports.
    """

    def __init__(self, session: AsyncSession, tz: tzinfo, top_selling_limit: int = 20):
        super().__init__(session)
        self.tz = tz
        self.top_selling_limit = top_selling_limit

    async def get_profit_loss_report(self, start_date: date, end_date: date) -> ProfitLossReport:
        """
        Generate the Profit & Loss report for an inclusive calendar date range.

        Sales are selected by timestamp between the start of ``start_date``
        and the last instant of ``end_date``; expenses carry no time of day
        and are selected by calendar date. A start date after the end date
        selects nothing and yields a report of zeros.

        Args:
            start_date: First day of the period
            end_date: Last day of the period

        Returns:
            ProfitLossReport for the period

        Raises:
            DataAccessError: If any of the three aggregate reads fails
        """
        logger.info(f"Generating profit & loss report: {start_date} .. {end_date}")

        range_start = start_of_day(start_date, self.tz)
        range_end = end_of_day(end_date, self.tz)

        total_revenue = await self._get_total_revenue(range_start, range_end)
        total_cogs = await self._get_total_cogs(range_start, range_end)
        expenses_by_category = await self._get_expenses_by_category(start_date, end_date)

        gross_profit = total_revenue - total_cogs
        total_expenses = sum((e.total for e in expenses_by_category), ZERO)
        net_profit = gross_profit - total_expenses

        return ProfitLossReport(
            total_revenue=total_revenue,
            total_cogs=total_cogs,
            gross_profit=gross_profit,
            expenses_by_category=expenses_by_category,
            total_expenses=total_expenses,
            net_profit=net_profit,
            start_date=start_date,
            end_date=end_date,
        )

    async def _get_total_revenue(self, range_start, range_end) -> Decimal:
        stmt = (
            select(func.sum(Sale.total_amount).label("total_revenue"))
            .where(
                and_(
                    Sale.date >= range_start,
                    Sale.date <= range_end,
                )
            )
        )
        result = await self._execute(stmt, PROFIT_LOSS_FAILURE)
        return self._decimal(result.scalar(), PROFIT_LOSS_FAILURE)

    async def _get_total_cogs(self, range_start, range_end) -> Decimal:
        stmt = (
            select(func.sum(SaleItem.quantity * SaleItem.cost_price).label("total_cogs"))
            .select_from(SaleItem)
            .join(Sale, SaleItem.sale_id == Sale.id)
            .where(
                and_(
                    Sale.date >= range_start,
                    Sale.date <= range_end,
                )
            )
        )
        result = await self._execute(stmt, PROFIT_LOSS_FAILURE)
        return self._decimal(result.scalar(), PROFIT_LOSS_FAILURE)

    async def _get_expenses_by_category(self, start_date: date, end_date: date) -> List[ExpenseCategoryTotal]:
        total = func.sum(DailyExpense.amount).label("total")
        stmt = (
            select(DailyExpense.category, total)
            .where(
                and_(
                    DailyExpense.expense_date >= start_date,
                    DailyExpense.expense_date <= end_date,
                )
            )
            .group_by(DailyExpense.category)
            # Category name breaks ties so equal totals keep a stable order
            .order_by(total.desc(), DailyExpense.category.asc())
        )
        result = await self._execute(stmt, PROFIT_LOSS_FAILURE)

        return [
            ExpenseCategoryTotal(
                category=row.category,
                total=self._decimal(row.total, PROFIT_LOSS_FAILURE),
            )
            for row in result.all()
        ]

    async def get_top_selling_products(self) -> List[TopSellingProduct]:
        """
        Rank products by units sold across all sales.

        Returns:
            At most ``top_selling_limit`` products, most units sold first
        """
        logger.info(f"Generating top selling products report (limit {self.top_selling_limit})")

        total_quantity = func.sum(SaleItem.quantity).label("total_quantity_sold")
        stmt = (
            select(
                SaleItem.product_id,
                SaleItem.product_name,
                Product.code.label("product_code"),
                total_quantity,
                func.sum(SaleItem.total_price).label("total_revenue"),
            )
            .select_from(SaleItem)
            .join(Product, SaleItem.product_id == Product.id)
            .group_by(SaleItem.product_id, SaleItem.product_name, Product.code)
            .order_by(total_quantity.desc(), SaleItem.product_id.asc())
            .limit(self.top_selling_limit)
        )
        result = await self._execute(stmt, TOP_SELLING_FAILURE)

        return [
            TopSellingProduct(
                product_id=row.product_id,
                product_name=row.product_name,
                product_code=row.product_code,
                total_quantity_sold=self._int(row.total_quantity_sold, TOP_SELLING_FAILURE),
                total_revenue=self._decimal(row.total_revenue, TOP_SELLING_FAILURE),
            )
            for row in result.all()
        ]

    async def get_balance_sheet(self, as_of: date | None = None) -> BalanceSheetReport:
        """
        Generate the balance sheet snapshot of the current financial position.

        The figures are read as they stand now; ``as_of`` only labels the
        snapshot and defaults to today in the reporting time zone.

        Raises:
            DataAccessError: If any of the three aggregate reads fails
        """
        as_of = as_of or today_in(self.tz)
        logger.info(f"Generating balance sheet as of {as_of}")

        inventory_stmt = select(func.sum(Product.stock * Product.cost).label("total_inventory_value"))
        result = await self._execute(inventory_stmt, BALANCE_SHEET_FAILURE)
        inventory = self._decimal(result.scalar(), BALANCE_SHEET_FAILURE)

        receivable_stmt = (
            select(func.sum(Customer.outstanding_balance).label("total_receivable"))
            .where(Customer.outstanding_balance > 0)
        )
        result = await self._execute(receivable_stmt, BALANCE_SHEET_FAILURE)
        accounts_receivable = self._decimal(result.scalar(), BALANCE_SHEET_FAILURE)

        # != leaves out invoices whose status is NULL
        payable_stmt = (
            select(func.sum(PurchaseInvoice.balance_due).label("total_payable"))
            .where(PurchaseInvoice.payment_status != "Paid")
        )
        result = await self._execute(payable_stmt, BALANCE_SHEET_FAILURE)
        accounts_payable = self._decimal(result.scalar(), BALANCE_SHEET_FAILURE)

        return BalanceSheetReport(
            as_of_date=as_of,
            assets=BalanceSheetAssets(
                inventory=inventory,
                accounts_receivable=accounts_receivable,
            ),
            liabilities=BalanceSheetLiabilities(accounts_payable=accounts_payable),
        )
