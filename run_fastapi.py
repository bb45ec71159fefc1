"""
Main entry point for the work-order HTTP API.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn backstage.fastapi_app:app --host 0.0.0.0 --port 8080 --reload
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from backstage.config.settings import get_config

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    config = get_config(env)

    print(f"Starting backstage API in {env} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "backstage.fastapi_app:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level="info" if config.DEBUG else "warning",
    )
