import structlog
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from scalar_fastapi import get_scalar_api_reference

from src.config.settings import settings
from src.core.observability import init_observability
from src.domains.generator.router import router as generator_router
from src.domains.generator.schemas import ValidationErrorResponse, translate_validation_errors

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    logger.info("app_starting", app_name=settings.APP_NAME, environment=settings.APP_ENV)
    yield
    logger.info("app_shutting_down", app_name=settings.APP_NAME)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report validation failures as one Portuguese message per field."""
    field_errors = translate_validation_errors(list(exc.errors()))
    logger.info(
        "profile_validation_failed",
        path=request.url.path,
        fields=[error.field for error in field_errors],
    )
    body = ValidationErrorResponse(detail=field_errors)
    return JSONResponse(
        status_code=422,
        content=body.model_dump(),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    # Initialize observability (GlitchTip/Sentry)
    init_observability()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Gerador de Treinos Personalizados",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-Id"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(generator_router, prefix=f"{settings.API_V1_PREFIX}/generator", tags=["Generator"])

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV,
        }

    # Scalar API Reference - Modern API documentation
    @app.get("/reference", include_in_schema=False)
    async def scalar_html():
        return get_scalar_api_reference(
            openapi_url=app.openapi_url,
            title=f"{settings.APP_NAME} - API Reference",
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
