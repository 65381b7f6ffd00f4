from pydantic import Field

from backoffice.common.schemas import CamelModel


class ProductStats(CamelModel):
    total_products: int = Field(..., ge=0, description="Number of products in the catalogue")


class LowStockStats(CamelModel):
    total_low_stock_items: int = Field(..., ge=0, description="Products with 0 < stock < minStock")


class OutOfStockStats(CamelModel):
    total_out_of_stock_items: int = Field(..., ge=0, description="Products with stock = 0")
