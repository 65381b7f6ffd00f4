"""
Pydantic schemas for financial reports.

All schemas use strict=True (via AppBaseModel) to prevent implicit type coercion.
"""

from datetime import date as date_type
from typing import List

from pydantic import Field

from backoffice.common.schemas import AppBaseModel, CamelModel, Money


class ExpenseCategoryTotal(AppBaseModel):
    """Expenses of one category over the report period."""
    category: str = Field(..., description="Expense category")
    total: Money = Field(..., description="Sum of the category's expenses (refunds may make it negative)")


class ProfitLossReport(CamelModel):
    """
    Profit & Loss report for an inclusive calendar date range.

    Identities that always hold:
        gross_profit == total_revenue - total_cogs
        net_profit == gross_profit - total_expenses
        total_expenses == sum(e.total for e in expenses_by_category)
    """
    total_revenue: Money = Field(..., description="Sum of sale totals in the period")
    total_cogs: Money = Field(..., description="Sum of quantity * cost price over sold items")
    gross_profit: Money = Field(..., description="Revenue minus COGS (may be negative)")
    expenses_by_category: List[ExpenseCategoryTotal] = Field(
        ...,
        description="Expenses grouped by category, largest first"
    )
    total_expenses: Money = Field(..., description="Sum of all category totals")
    net_profit: Money = Field(..., description="Gross profit minus total expenses")
    start_date: date_type = Field(..., description="First day of the period (YYYY-MM-DD)")
    end_date: date_type = Field(..., description="Last day of the period (YYYY-MM-DD)")


class TopSellingProduct(AppBaseModel):
    """Product ranked by units sold."""
    product_id: str = Field(..., description="Product ID")
    product_name: str = Field(..., description="Product name recorded on the sale items")
    product_code: str = Field(..., description="Product code")
    total_quantity_sold: int = Field(..., ge=0, description="Units sold")
    total_revenue: Money = Field(..., description="Sum of the items' total price")


class BalanceSheetAssets(CamelModel):
    inventory: Money = Field(..., description="Sum of stock * cost over all products")
    accounts_receivable: Money = Field(..., description="Sum of positive customer balances")


class BalanceSheetLiabilities(CamelModel):
    accounts_payable: Money = Field(..., description="Balance due on purchase invoices not yet paid")


class BalanceSheetReport(CamelModel):
    """
    Balance sheet snapshot taken when the report is requested.

    Equity is left out; the admin UI derives it as assets minus liabilities.
    """
    as_of_date: date_type = Field(..., description="Day of the snapshot (YYYY-MM-DD)")
    assets: BalanceSheetAssets
    liabilities: BalanceSheetLiabilities
