from pydantic import Field

from backoffice.common.schemas import AppBaseModel, CamelModel, Money


class SalesStats(CamelModel):
    """Totals of the sales registered today."""
    total_sales_amount: Money = Field(..., description="Sum of today's sale totals")
    total_sales_count: int = Field(..., ge=0, description="Number of sales today")


class DailySalesSummary(AppBaseModel):
    """One day of the dashboard sales chart."""
    date: str = Field(..., description="Short date label, e.g. 'Jul 15'")
    name: str = Field(..., description="Short day name, e.g. 'Mon'")
    revenue: Money = Field(..., description="Sum of sale totals, rounded to cents")
    cogs: Money = Field(..., description="Cost of goods sold, rounded to cents")
    profit: Money = Field(..., description="Revenue minus COGS, rounded to cents")
