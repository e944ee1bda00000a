# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.api.errors import register_error_handlers
from app.api.routers import health, products
from app.data.database import Base, engine
from app.data.seed import seed
from app.utils.logging import get_logger
from app.utils.settings import CATALOG_BACKEND, SEED_DEMO_DATA

# import modeli przed create_all
from app.data.models.product import ProductModel  # noqa: F401

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if CATALOG_BACKEND != "remote":
        logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
        Base.metadata.create_all(bind=engine)
        if SEED_DEMO_DATA:
            seed()
    logger.info(f"Catalog backend: {CATALOG_BACKEND}")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Product Catalog Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
