import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from timesheet.core.config import ServerConfig
from timesheet.core.database import init_database, seed_test_data
from timesheet.core.errors import register_exception_handlers
from timesheet.api.endpoints import general, work_hours, admin, employees

# Configure logging
log_level = getattr(logging, ServerConfig.LOG_LEVEL.upper())
logging.basicConfig(level=log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    logger.info("=" * 60)
    logger.info(f"{ServerConfig.APP_NAME.upper()}")
    logger.info(f"Version: {ServerConfig.APP_VERSION}")
    logger.info("=" * 60)

    init_database()

    if ServerConfig.SEED_TEST_DATA:
        seed_test_data()

    if ServerConfig.ADMIN_PASSWORD == "admin":
        logger.warning("ADMIN_PASSWORD is the default 'admin' - set it in the environment")

    logger.info(f"Database: {ServerConfig.DATABASE_PATH}")
    logger.info(f"Static files: {ServerConfig.STATIC_DIR if os.path.isdir(ServerConfig.STATIC_DIR) else 'none'}")
    logger.info("=" * 60)

    yield  # Server is running

    logger.info("Shutting down Timesheet Server...")


app = FastAPI(
    title=ServerConfig.APP_NAME,
    version=ServerConfig.APP_VERSION,
    description=ServerConfig.APP_DESCRIPTION,
    lifespan=lifespan,
    docs_url="/docs" if ServerConfig.ENABLE_API_DOCS else None,
    redoc_url="/redoc" if ServerConfig.ENABLE_API_DOCS else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ServerConfig.CORS_ORIGINS,
    allow_credentials=ServerConfig.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Signed cookie session holding the admin flag
app.add_middleware(
    SessionMiddleware,
    secret_key=ServerConfig.SESSION_SECRET,
    https_only=ServerConfig.SESSION_HTTPS_ONLY,
)

register_exception_handlers(app)

app.include_router(general.router, tags=["General"])
app.include_router(work_hours.router, tags=["Work Hours"])
app.include_router(admin.router, tags=["Admin"])
app.include_router(employees.router, tags=["Employees"])

# Frontend; mounted last so API routes take precedence
if os.path.isdir(ServerConfig.STATIC_DIR):
    app.mount("/", StaticFiles(directory=ServerConfig.STATIC_DIR, html=True), name="static")
