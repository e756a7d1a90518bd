from collections.abc import Iterable

from fastapi import APIRouter

from app.api.v1.crud import ResourceConfig, build_resource_router
from app.api.v1.endpoints import auth


def build_api_router(resources: Iterable[ResourceConfig]) -> APIRouter:
    api_router = APIRouter(prefix="/api/v1")

    api_router.include_router(auth.router, tags=["Auth"])

    for resource in resources:
        api_router.include_router(build_resource_router(resource))

    return api_router
