from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
import logging
import sys

APP_VERSION = "1.0.0"

# Configure Logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting up incident analysis service...")
    yield
    # Shutdown
    logger.info("Shutting down...")

app = FastAPI(
    title="Incident Analysis API",
    version=APP_VERSION,
    description="Legal guidance for incident reports: categories, sections, precedents and entities",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
async def health_check():
    return {"status": "ok", "version": APP_VERSION}

# Include Routers
from app.api.routes import analysis, legal, drafting
app.include_router(analysis.router, prefix="/api/analysis", tags=["Analysis"])
app.include_router(legal.router, prefix="/api/legal", tags=["Legal"])
app.include_router(drafting.router, prefix="/api/drafting", tags=["Drafting"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
