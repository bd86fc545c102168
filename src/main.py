"""
FastAPI Application: Hexagonal Architecture
Main entry point for the BillBot Statement Analyzer API
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from api.v1.routes import health, analyze, statements
from api.v1.dependencies import get_statement_store
from application.session import StatementSession
from application.use_cases.load_statement import LoadStatementUseCase
from domain.exceptions import PersistenceError
from config import settings


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the app session and restore the saved statement"""
    app.state.session = StatementSession()

    try:
        restored = await LoadStatementUseCase(get_statement_store(), app.state.session).restore()
        if restored is None:
            logger.info("No saved statement to restore")
    except PersistenceError as e:
        logger.warning("Could not restore saved statement: %s", e)

    yield

    app.state.session.clear()


# Create FastAPI app
app = FastAPI(
    title="BillBot Statement Analyzer API",
    description="Upload a bank statement and ask questions about it",
    version=health.SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(health.router, prefix="/api/v1", tags=["Health"])
app.include_router(statements.router, prefix="/api/v1", tags=["Statements"])
app.include_router(analyze.router, prefix="/api/v1", tags=["Analysis"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "BillBot Statement Analyzer API",
        "version": health.SERVICE_VERSION,
        "architecture": "Hexagonal (Ports & Adapters)",
        "docs": "/docs",
        "health": "/api/v1/health"
    }


def run():
    """Run the API with uvicorn"""
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
