from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from auth.passwords import PasswordHasher
from auth.service import AuthService
from auth.tokens import TokenIssuer
from auth.verification import strategy_for
from persistence import AsyncCollectionStore, CollectionStore, DiskJsonDocumentStore
from services import CategoryService, ProductService
from settings import Settings


@dataclass
class Services:
    """
    Everything a request handler needs, built once per application.

    All services share one store instance, and with it one database file.
    """

    settings: Settings
    store: AsyncCollectionStore
    auth: AuthService
    categories: CategoryService
    products: ProductService


def build_services(settings: Settings) -> Services:
    documents = DiskJsonDocumentStore(settings.database_path)
    store = AsyncCollectionStore(CollectionStore(documents))

    auth = AuthService(
        store,
        PasswordHasher(rounds=settings.bcrypt_rounds),
        TokenIssuer(settings.jwt_secret, settings.jwt_alg, debug_log_tokens=settings.debug_log_tokens),
        strategy_for(settings.verification_method),
    )

    return Services(
        settings=settings,
        store=store,
        auth=auth,
        categories=CategoryService(store),
        products=ProductService(store),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
