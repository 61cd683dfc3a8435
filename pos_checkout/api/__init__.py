# pos_checkout/api/__init__.py
from fastapi import FastAPI

from pos_checkout.api.routers import carts, dispatch, health


def include_routers(app: FastAPI) -> FastAPI:
    app.include_router(health.router)
    app.include_router(dispatch.router)
    app.include_router(carts.router)
    return app
