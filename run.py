"""
Development server for the archive API.

Usage:
    python run.py

Environment variables (set in .env file):
    DEBUG=true - Debug logging and auto-reload
    HOST / PORT - Bind address (default: 127.0.0.1:8000)
"""

import os

import uvicorn
from slack_archiver.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))

    print(f"{settings.app_name}: POST http://{host}:{port}/api/archive")

    uvicorn.run(
        "slack_archiver.main:app",
        host=host,
        port=port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
