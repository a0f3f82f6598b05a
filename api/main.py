"""
FastAPI application for the presentation clock
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router, get_clock
from core.utils.logger import setup_logger, get_logger
import config

# Setup logging
log_file = Path(config.LOG_DIR) / "api.log"
setup_logger("root", str(log_file))
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 50)
    logger.info("ChronoSlide API Starting")
    logger.info("=" * 50)
    yield
    # No tick may outlive the server
    get_clock().stop()
    logger.info("ChronoSlide API Shutting Down")


app = FastAPI(
    title="ChronoSlide API",
    description="Keep a live presentation on its per-slide time budget",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1", tags=["presentation"])


@app.get("/")
async def root():
    return {
        "name": "ChronoSlide API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


def run():
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )


if __name__ == "__main__":
    run()
