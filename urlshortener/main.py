from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
import time

import uvicorn

from urlshortener.core.config import settings
from urlshortener.api import shortener, analytics
from urlshortener.core.logging_config import configure_logging
from urlshortener.db.registry import UrlRegistry

logger = configure_logging(settings.LOG_LEVEL)
request_logger = logging.getLogger("urlshortener.requests")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
    logger.info("Client ID loaded successfully.")
    yield
    logger.info("Shutting down gracefully, dropping %d registered short codes.", len(app.state.registry))
    app.state.registry.clear()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="In-memory URL Shortener Microservice",
        # single-segment paths belong to the /{short_code} redirect
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.registry = UrlRegistry()

    @app.get("/health", tags=["health"])
    def health_check():
        return {"status": "healthy", "service": "url-shortener"}

    # analytics before the catch-all /{short_code} redirect
    app.include_router(analytics.router)
    app.include_router(shortener.router, prefix="")

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"
        request_logger.info(f"Request: {request.method} {request.url.path} from {client_ip}")

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        request_logger.info(
            f"Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        logger.warning(f"Rejected malformed request to {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": f"Invalid request body. {errors}"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


app = create_app()


def run():
    logger.info(f"URL Shortener Microservice listening on port {settings.PORT}")
    logger.info(f"Access your service at: http://localhost:{settings.PORT}/")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
