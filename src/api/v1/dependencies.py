"""
API Dependencies: Dependency Injection Container
"""

import logging
from functools import lru_cache

from fastapi import Request

from application.ports.analysis_backend import IAnalysisBackend
from application.ports.statement_store import IStatementStore
from application.session import StatementSession
from application.use_cases.analyze_query import AnalyzeQueryUseCase
from application.use_cases.load_statement import LoadStatementUseCase
from infrastructure.analysis.claude_backend import ClaudeAnalysisBackend
from infrastructure.analysis.mock_backend import MockAnalysisBackend
from infrastructure.analysis.ollama_backend import OllamaAnalysisBackend
from infrastructure.analysis.statement_analyzer import StatementAnalyzer
from infrastructure.analysis.summarizer import StatementSummarizer
from infrastructure.storage.statement_store import S3StatementStore, LocalStatementStore
from config import settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_statement_store() -> IStatementStore:
    """Get statement store implementation (S3 or Local fallback)"""
    
    if settings.STORAGE_BACKEND == "s3":
        try:
            return S3StatementStore(
                bucket_name=settings.S3_BUCKET_NAME,
                aws_access_key=settings.AWS_ACCESS_KEY_ID,
                aws_secret_key=settings.AWS_SECRET_ACCESS_KEY,
                region=settings.AWS_REGION,
                endpoint_url=settings.S3_ENDPOINT_URL or None,
                environment=settings.STORAGE_ENVIRONMENT
            )
        except Exception as e:
            logger.warning("S3 initialization failed, using local storage: %s", e)
    
    return LocalStatementStore(base_path=settings.LOCAL_STORAGE_PATH)


@lru_cache()
def get_analysis_backend() -> IAnalysisBackend:
    """Get analysis backend implementation from ANALYSIS_BACKEND"""
    
    backend = settings.ANALYSIS_BACKEND.lower()
    
    if backend == "claude":
        if settings.ANTHROPIC_API_KEY:
            return ClaudeAnalysisBackend(
                api_key=settings.ANTHROPIC_API_KEY,
                model=settings.CLAUDE_MODEL,
                max_tokens=settings.AI_MAX_TOKENS,
                temperature=settings.AI_TEMPERATURE,
                timeout=settings.ANALYSIS_TIMEOUT_SECONDS
            )
        logger.warning("ANTHROPIC_API_KEY not set, using mock analysis backend")
    elif backend == "ollama":
        return OllamaAnalysisBackend(
            host=settings.OLLAMA_HOST,
            model=settings.OLLAMA_MODEL,
            temperature=settings.AI_TEMPERATURE,
            max_tokens=settings.AI_MAX_TOKENS,
            timeout=settings.ANALYSIS_TIMEOUT_SECONDS
        )
    elif backend != "mock":
        logger.warning("Unknown ANALYSIS_BACKEND '%s', using mock analysis backend", backend)
    
    return MockAnalysisBackend()


def get_session(request: Request) -> StatementSession:
    """Session owned by the running application"""
    return request.app.state.session


def get_load_use_case(request: Request) -> LoadStatementUseCase:
    """Get load statement use case bound to the app session"""
    
    return LoadStatementUseCase(
        store=get_statement_store(),
        session=get_session(request)
    )


def get_analyze_use_case() -> AnalyzeQueryUseCase:
    """Get analyze query use case with injected dependencies"""
    
    return AnalyzeQueryUseCase(
        backend=get_analysis_backend(),
        analyzer=StatementAnalyzer(
            summarizer=StatementSummarizer(recent_rows_limit=settings.RECENT_ROWS_LIMIT)
        ),
        timeout_seconds=settings.ANALYSIS_TIMEOUT_SECONDS
    )
