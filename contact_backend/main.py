from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contact_backend.core.database import session_manager
from contact_backend.core.exceptions import NotFoundError, ValidationError

from contact_backend.api.v1.endpoints.contacts import router as contacts_router

from sqlalchemy import text
import logging
import uvicorn
from contextlib import asynccontextmanager
from contact_backend.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Async context manager for app lifespan events"""

    logger.info("🚀 Starting contact form backend...")
    logger.info("🔌 Opening the database...")
    try:
        await session_manager.init()
        logger.info("✅ Database ready, page_contacts table in place")
    except Exception as e:
        # Keep serving; storage-backed requests fail one by one with their 500.
        logger.error(f"🔥 Error opening database: {str(e)}")

    try:
        logger.info("🏁 Contact form backend startup complete")
        yield
    finally:
        logger.info("🛑 Beginning application shutdown...")
        await session_manager.close()
        logger.info("👋 Application shutdown complete")


app = FastAPI(
    title="Contact Form API",
    description="Stores, lists and clears contact page submissions",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Request: {request.method} {request.url}")
    logger.info(f"Origin: {request.headers.get('origin')}")
    response = await call_next(request)
    logger.info(f"Response status: {response.status_code}")
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def missing_fields_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"message": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": str(exc)})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.error(f"Validation Error: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request."},
    )


@app.get("/", tags=["Health Check"])
async def health_check():
    try:
        async with session_manager.get_session() as db:
            await db.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "service": "Contact Form API",
            "database": "connected",
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return {
            "status": "unhealthy",
            "service": "Contact Form API",
            "database": "disconnected",
        }


app.include_router(contacts_router)

logger.info(f"✅ Loaded {len(app.routes)} routes")


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
