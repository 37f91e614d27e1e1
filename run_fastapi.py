"""
Main entry point for the FastAPI application.
Run this file to start the chat server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chatserver.fastapi_app:app --host 0.0.0.0 --port 6688 --reload
"""

import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

logger = logging.getLogger("chatserver.run")

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    debug = env == "development"
    port = int(os.getenv("PORT", 6688))
    host = os.getenv("HOST", "0.0.0.0")

    logging.basicConfig(level=logging.INFO)
    logger.info(f"Starting chat server in {env} mode on http://{host}:{port}")
    logger.info(f"API docs available at http://{host}:{port}/docs")

    uvicorn.run(
        "chatserver.fastapi_app:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info" if debug else "warning",
    )
