# =============================================
# trainhub/main.py
# =============================================
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import time
import uvicorn

from trainhub.config.settings import get_settings
from trainhub.config.database import init_database, close_database, check_database_health
from trainhub.api.v1.router import api_router
from trainhub.core.exception_handlers import register_exception_handlers

# =============================================
# SETTINGS
# =============================================
settings = get_settings()

# =============================================
# LOGGING CONFIGURATION
# =============================================
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

# =============================================
# LIFESPAN CONTEXT MANAGER
# =============================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})...")
    await init_database()
    logger.info(f"{settings.APP_NAME} started successfully")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_database()

# =============================================
# FASTAPI APPLICATION
# =============================================
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Marketplace connecting organizations that post trainings with freelance trainers.

    ## Roles

    * **Admin**: manages every entity, reference data and accounts
    * **Maintainer**: reviews organizations, trainings and freelancers
    * **Organization**: registers, then posts and manages its own trainings
    * **Freelancer**: maintains a trainer profile

    ## Conventions

    * Request and response bodies use camelCase keys
    * Errors are returned as `{"error": "<message>"}`
    * Bulk endpoints (PATCH) apply one action to a list of ids, all or nothing
    """,
    version=settings.VERSION,
    openapi_tags=[
        {"name": "Authentication", "description": "Login and password management"},
        {"name": "Organizations", "description": "Organization registration, review and profiles"},
        {"name": "Training Locations", "description": "Reference data: state and district"},
        {"name": "Training Categories", "description": "Reference data: categories and bulk import"},
        {"name": "Stacks", "description": "Reference data: technology stacks"},
        {"name": "Trainings", "description": "Training postings"},
        {"name": "Users", "description": "Account management"},
        {"name": "Maintainers", "description": "Maintainer accounts"},
        {"name": "Freelancers", "description": "Trainer profiles"},
        {"name": "Admin", "description": "Dashboard and admin profile"},
        {"name": "Health", "description": "Health checks and API status"},
    ],
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# =============================================
# MIDDLEWARE CONFIGURATION
# =============================================

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time to response headers"""
    start_time = time.time()
    response = await call_next(request)
    response.headers["X-Process-Time"] = str(time.time() - start_time)
    return response

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    start_time = time.time()
    logger.info(f"Request: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        f"Response: {request.method} {request.url.path} - "
        f"Status: {response.status_code} - Time: {process_time:.4f}s"
    )
    return response

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Process-Time"],
)

# =============================================
# EXCEPTION HANDLERS
# =============================================
register_exception_handlers(app)

# =============================================
# ROUTERS
# =============================================
app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/", tags=["Health"])
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/health"
    }

@app.get("/health", tags=["Health"])
async def health():
    """Health check with database connectivity test"""
    database_ok = await check_database_health()
    return {
        "status": "healthy" if database_ok else "degraded",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "database": "connected" if database_ok else "disconnected"
    }

# =============================================
# DEVELOPMENT SERVER
# =============================================
if __name__ == "__main__":
    uvicorn.run(
        "trainhub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
        access_log=settings.DEBUG
    )
