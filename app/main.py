# app/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.config.settings import settings
from app.core.middleware import setup_middleware, setup_exception_handlers
from app.api.router import api_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _environment() -> str:
    return "development" if settings.debug else "production"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{settings.app_name} starting - version {settings.version} ({_environment()})")
    logger.info(f"Supabase: {settings.supabase_host}")
    if not settings.has_service_role:
        logger.warning("SUPABASE_SERVICE_ROLE_KEY no configurada: /me y /admin responderán 500")
    if not settings.supabase_jwt_secret:
        logger.info("SUPABASE_JWT_SECRET no configurado: los tokens se validan contra el backend")

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API del CRM Farol: clientes, dashboard financiero y gestión de accesos",
    docs_url="/docs",
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": settings.app_name,
        "version": settings.version,
        "status": "running",
        "environment": _environment(),
        "docs": "/docs",
        "api": "/api"
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.version,
        "app": settings.app_name,
        "environment": _environment(),
        "backend_configured": settings.has_service_role
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
