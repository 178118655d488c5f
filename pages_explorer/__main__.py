"""
Entry point for running as module: python -m pages_explorer
"""

import uvicorn

from pages_explorer.settings import settings


if __name__ == "__main__":
    uvicorn.run(
        "pages_explorer.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
