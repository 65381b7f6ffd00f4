from sqlalchemy import select, func, and_

from backoffice.common.services import AppService
from backoffice.products.models import Product
from backoffice.products.schemas import ProductStats, LowStockStats, OutOfStockStats


class ProductStatsService(AppService):
    """Inventory counters shown on the dashboard."""

    async def get_stats(self) -> ProductStats:
        failure = "Failed to fetch product stats"
        result = await self._execute(select(func.count()).select_from(Product), failure)
        return ProductStats(total_products=self._int(result.scalar(), failure))

    async def get_low_stock_stats(self) -> LowStockStats:
        # Out of stock items are counted separately
        failure = "Failed to fetch low stock product stats"
        stmt = (
            select(func.count())
            .select_from(Product)
            .where(and_(Product.stock > 0, Product.stock < Product.min_stock))
        )
        result = await self._execute(stmt, failure)
        return LowStockStats(total_low_stock_items=self._int(result.scalar(), failure))

    async def get_out_of_stock_stats(self) -> OutOfStockStats:
        failure = "Failed to fetch out of stock product stats"
        stmt = select(func.count()).select_from(Product).where(Product.stock == 0)
        result = await self._execute(stmt, failure)
        return OutOfStockStats(total_out_of_stock_items=self._int(result.scalar(), failure))
