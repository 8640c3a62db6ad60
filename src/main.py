import logging
import structlog
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import api_router
from .config import get_settings
from .core.database import create_tables, engine, table_exists
from .exceptions import NewsdeskError


def configure_logging(settings):
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s"
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.log_format == "json" else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


settings = get_settings()

configure_logging(settings)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Newsdesk API", version="0.1.0")
    try:
        if not table_exists(engine, "news"):
            logger.info("News table missing, creating schema")
            create_tables(bind=engine)
        logger.info("Database tables created/verified")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    engine.dispose()
    logger.info("Shutting down Newsdesk API")


def create_application() -> FastAPI:
    app = FastAPI(
        title="Newsdesk",
        description="REST API for listing and editing news with JWT-protected endpoints",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(NewsdeskError)
    async def newsdesk_exception_handler(request: Request, exc: NewsdeskError):
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                path=request.url.path,
                method=request.method,
                error_code=exc.error_code,
                error=exc.message,
                cause=str(exc.__cause__) if exc.__cause__ else None,
            )
        else:
            logger.info(
                "Request rejected",
                path=request.url.path,
                method=request.method,
                error_code=exc.error_code,
                error=exc.message,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Invalid request", path=request.url.path, errors=exc.errors())
        return JSONResponse(status_code=400, content={"error": "invalid input"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception occurred",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    app.include_router(api_router)

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="info",
        access_log=False,
    )
