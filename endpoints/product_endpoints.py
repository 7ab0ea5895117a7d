from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from container import Services, get_services

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(
    search: Optional[str] = None,
    categoryId: Optional[str] = None,
    services: Services = Depends(get_services),
) -> JSONResponse:
    if search:
        products = await services.products.search(search)
    elif categoryId:
        products = await services.products.filter_by_category(categoryId)
    else:
        products = await services.products.get_all()
    return JSONResponse(products)


@router.get("/{product_id}")
async def get_product(product_id: str, services: Services = Depends(get_services)) -> JSONResponse:
    return JSONResponse(await services.products.get_by_id(product_id))
