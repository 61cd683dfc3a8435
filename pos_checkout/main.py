# pos_checkout/main.py
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pos_checkout.api import include_routers
from pos_checkout.utils.logging import get_logger
from pos_checkout.utils.settings import CORS_ORIGINS

logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="POS Checkout Service",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    include_routers(app)

    logger.info("POS checkout service ready")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
