import logging
from fastapi import FastAPI
from slack_archiver import __version__
from slack_archiver.config import get_settings
from slack_archiver.api.routes import archive

settings = get_settings()

# Configure application logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Set log level for app modules
logger = logging.getLogger("slack_archiver")
logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

app = FastAPI(
    title=settings.app_name,
    description="Archive Slack threads as Markdown, images and a ZIP bundle",
    version=__version__,
)

# Include routers
app.include_router(archive.router, prefix="/api", tags=["Archive"])


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": __version__,
        "endpoints": {
            "archive": "/api/archive",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": settings.app_name}
