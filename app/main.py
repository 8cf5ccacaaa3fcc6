# app/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings, setup_logging
from app.core.error_messages import PaymentProviderError
from app.database import MongoDB
from app.routes.auth import auth_router
from app.routes.carts import carts_router
from app.routes.menu import menu_router
from app.routes.payments import payments_router
from app.routes.reviews import reviews_router
from app.routes.stats import stats_router
from app.routes.users import users_router
from app.services.payment import BasePaymentGateway, build_payment_gateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.mongo is None:
        app.state.mongo = MongoDB.connect(settings)
        await app.state.mongo.check_connection()
    if app.state.payment_gateway is None:
        app.state.payment_gateway = build_payment_gateway(settings)

    yield

    app.state.mongo.close()


def create_app(
    mongo: Optional[MongoDB] = None,
    payment_gateway: Optional[BasePaymentGateway] = None,
) -> FastAPI:
    """
    Build the API.

    A store handle or payment gateway passed in is used as-is and left open
    on shutdown; anything missing is created from settings at startup.
    """
    app = FastAPI(title="Bistro Boss API", lifespan=lifespan)
    app.state.mongo = mongo
    app.state.payment_gateway = payment_gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(menu_router)
    app.include_router(reviews_router)
    app.include_router(carts_router)
    app.include_router(payments_router)
    app.include_router(stats_router)

    @app.get("/")
    async def root():
        return {"message": "Bistro boss is running"}

    @app.exception_handler(PaymentProviderError)
    async def payment_provider_error_handler(request: Request, exc: PaymentProviderError):
        return JSONResponse(status_code=502, content={"detail": exc.message, "code": exc.code})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        message = str(exc) if settings.DEBUG else "internal server error"
        return JSONResponse(status_code=500, content={"message": message})

    return app


setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Bistro boss listening on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
