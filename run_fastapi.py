"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn roomchat.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5001
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from roomchat.config.settings import get_config

if __name__ == "__main__":
    settings = get_config()
    debug = settings.DEBUG

    print(f"Starting FastAPI application in {settings.APP_ENV} mode...")
    print(f"Server running on http://{settings.HOST}:{settings.PORT}")
    print(f"API docs available at http://{settings.HOST}:{settings.PORT}/docs")

    uvicorn.run(
        "roomchat.fastapi_app:create_fastapi_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
