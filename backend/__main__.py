"""
Entry point for running the application with `python -m backend`.
"""
import uvicorn

from backend.logging_config import get_logging_config
from backend.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=3000,
        reload=settings.is_development,
        log_config=get_logging_config(settings.log_level),
    )
