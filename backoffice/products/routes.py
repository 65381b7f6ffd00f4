from typing import Annotated

from fastapi import APIRouter, Depends, status

from backoffice.deps import SessionDependency
from backoffice.products.schemas import ProductStats, LowStockStats, OutOfStockStats
from backoffice.products.services import ProductStatsService

router = APIRouter()

async def get_product_stats_service(session: SessionDependency) -> ProductStatsService:
    return ProductStatsService(session)

ServiceDependency = Annotated[ProductStatsService, Depends(get_product_stats_service)]

@router.get("/stats", response_model=ProductStats, status_code=status.HTTP_200_OK, summary="Count all products")
async def get_product_stats(service: ServiceDependency):
    return await service.get_stats()

@router.get("/stats/lowstock", response_model=LowStockStats, status_code=status.HTTP_200_OK, summary="Count products below their minimum stock")
async def get_low_stock_stats(service: ServiceDependency):
    return await service.get_low_stock_stats()

@router.get("/stats/outofstock", response_model=OutOfStockStats, status_code=status.HTTP_200_OK, summary="Count products with no stock")
async def get_out_of_stock_stats(service: ServiceDependency):
    return await service.get_out_of_stock_stats()
