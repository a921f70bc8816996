# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn

from app.data.database import Base, engine
from app.api.routers import admin_orders, carts, health, orders, users, wallet
from app.utils.logging import setup_logging, get_logger

# import modeli zeby byly w Base.metadata przed create_all
from app.data import models  # noqa: F401

setup_logging()
logger = get_logger(__name__)


def init_db(bind=engine) -> None:
    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=bind)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 400 z detalami per pole zamiast domyslnego 422
    return JSONResponse(
        status_code=400,
        content={"message": "Validation error", "errors": jsonable_encoder(exc.errors())},
    )


def create_app(lifespan=lifespan) -> FastAPI:
    app = FastAPI(
        title="Pharmacy Cart & Checkout Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(admin_orders.router)
    app.include_router(wallet.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
