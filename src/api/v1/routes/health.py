"""
API Routes: Health Check
"""

from fastapi import APIRouter, Depends

from api.v1.schemas import HealthResponse
from api.v1.dependencies import get_statement_store, get_analysis_backend, get_session
from application.session import StatementSession
from infrastructure.storage.statement_store import S3StatementStore


router = APIRouter()

SERVICE_NAME = "billbot-statement-analyzer"
SERVICE_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(session: StatementSession = Depends(get_session)):
    """Health check endpoint"""
    
    storage = get_statement_store()
    storage_type = "s3" if isinstance(storage, S3StatementStore) else "local"
    
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        storage_type=storage_type,
        analysis_backend=get_analysis_backend().name,
        statement_loaded=session.is_loaded
    )
