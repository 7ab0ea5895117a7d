from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from auth.middleware import require_admin
from container import Services, get_services

router = APIRouter(prefix="/api/categories", tags=["categories"])


# Public routes
@router.get("")
async def list_categories(services: Services = Depends(get_services)) -> JSONResponse:
    return JSONResponse(await services.categories.get_all())


@router.get("/{category_id}")
async def get_category(category_id: str, services: Services = Depends(get_services)) -> JSONResponse:
    return JSONResponse(await services.categories.get_by_id(category_id))


# Admin only routes
@router.post("", dependencies=[Depends(require_admin)])
async def create_category(body: dict[str, Any], services: Services = Depends(get_services)) -> JSONResponse:
    return JSONResponse(await services.categories.create(body), status_code=201)


@router.put("/{category_id}", dependencies=[Depends(require_admin)])
async def update_category(
    category_id: str,
    body: dict[str, Any],
    services: Services = Depends(get_services),
) -> JSONResponse:
    return JSONResponse(await services.categories.update(category_id, body))


@router.delete("/{category_id}", dependencies=[Depends(require_admin)])
async def delete_category(category_id: str, services: Services = Depends(get_services)) -> JSONResponse:
    return JSONResponse(await services.categories.delete(category_id))
