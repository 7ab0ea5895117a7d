from __future__ import annotations

from .categories import CategoryService
from .products import ProductService

__all__ = ["CategoryService", "ProductService"]
