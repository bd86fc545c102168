"""
API Routes: Statement upload and management
"""

import os
import tempfile
from pathlib import Path

from fastapi import APIRouter, UploadFile, File, HTTPException, Depends

from api.v1.schemas import (
    UploadResponse,
    StatementOverviewSchema,
    CurrentStatementResponse,
    ClearResponse
)
from api.v1.dependencies import get_load_use_case, get_session, get_analyze_use_case
from application.session import StatementSession
from application.use_cases.analyze_query import AnalyzeQueryUseCase
from application.use_cases.load_statement import LoadStatementUseCase
from domain.exceptions import IngestionError, PersistenceError
from infrastructure.ingestion import get_statement_ingestor
from config import settings


router = APIRouter()


@router.post("/statements", response_model=UploadResponse)
async def upload_statement(
    statement_file: UploadFile = File(..., description="Statement file (JSON, CSV, PDF or image)"),
    use_case: LoadStatementUseCase = Depends(get_load_use_case)
):
    """
    Upload a statement and make it the current statement
    
    Replaces any previously loaded statement.
    """
    
    file_name = statement_file.filename or "statement"
    
    try:
        ingestor = get_statement_ingestor(file_name)
    except IngestionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    
    content = await statement_file.read()
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Statement file is too large")
    
    # Save uploaded file temporarily
    with tempfile.NamedTemporaryFile(delete=False, suffix=Path(file_name).suffix) as tmp_file:
        tmp_file.write(content)
        tmp_path = tmp_file.name
    
    try:
        result = await use_case.execute(ingestor, tmp_path, file_name)
    except IngestionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    finally:
        # Clean up temporary file
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
    
    statement = result.statement
    return UploadResponse(
        success=True,
        statement=StatementOverviewSchema(
            file_name=statement.file_name,
            total=statement.total,
            transaction_count=statement.transaction_count,
            first_date=statement.first_date,
            last_date=statement.last_date
        ),
        persisted=result.persisted,
        persistence_error=result.persistence_error
    )


@router.get("/statements/current", response_model=CurrentStatementResponse)
async def get_current_statement(
    session: StatementSession = Depends(get_session),
    use_case: AnalyzeQueryUseCase = Depends(get_analyze_use_case)
):
    """Current statement with its summary"""
    
    if not session.is_loaded:
        raise HTTPException(status_code=404, detail="No statement loaded")
    
    statement = session.current
    summary = use_case.analyzer.summarizer.summarize(statement)
    
    return CurrentStatementResponse(statement=statement.to_dict(), summary=summary.to_dict())


@router.delete("/statements/current", response_model=ClearResponse)
async def clear_current_statement(use_case: LoadStatementUseCase = Depends(get_load_use_case)):
    """Forget the current statement in memory and in storage"""
    
    was_loaded = use_case.session.is_loaded
    
    try:
        await use_case.clear()
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    
    return ClearResponse(success=True, cleared=was_loaded)
