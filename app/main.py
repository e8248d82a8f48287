import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings
from app.constants.promotion import PROMOTION
from app.routes import (
    cart,
    health
)
from app.utils.logger import setup_logger

setup_logger(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"server started on port {settings.port} ({settings.env})")
    logger.info(
        f"Active promotion: {PROMOTION.discount_value} {PROMOTION.discount_unit} off "
        f"cheapest of {sorted(PROMOTION.eligible_skus)} "
        f"when cart has any of {sorted(PROMOTION.prerequisite_skus)}"
    )
    yield

app = FastAPI(title=settings.app_name, lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def invalid_payload_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid payload on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": "invalid payload"})


app.include_router(cart.router, prefix="/cart", tags=["Cart"])
app.include_router(health.router, prefix="/health", tags=["Health"])


@app.get("/")
def root():
    return {
        "cart_endpoints": [
            "/cart/total", "/cart/promotion"
        ],
        "health_endpoints": [
            "/health/check"
        ]
    }


def run():
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
