import uvicorn
import logging
from timesheet.core.config import ServerConfig

# Configure logging for the main entry point
log_level = getattr(logging, ServerConfig.LOG_LEVEL.upper())
logging.basicConfig(level=log_level)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"Starting HTTP server on port {ServerConfig.PORT}...")
    logger.info(f"API Documentation: http://localhost:{ServerConfig.PORT}/docs")
    if not ServerConfig.SESSION_HTTPS_ONLY:
        logger.warning("⚠️  Session cookies are sent over plain HTTP - set SESSION_HTTPS_ONLY behind TLS")

    uvicorn.run(
        "timesheet.main:app",
        host=ServerConfig.HOST,
        port=ServerConfig.PORT,
        log_level=ServerConfig.LOG_LEVEL.lower(),
        workers=ServerConfig.WORKERS if ServerConfig.WORKERS > 1 else None
    )
