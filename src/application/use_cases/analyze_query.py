"""
Application Use Case: Analyze Query
Answers a free-text query about the currently loaded statement
"""

import asyncio
import logging
from typing import Optional

from application.ports.analysis_backend import IAnalysisBackend
from application.ports.analysis_context import IAnalysisContextProvider
from domain.entities.analysis import AnalysisQuery, AnalysisResponse
from domain.entities.statement import Statement
from domain.exceptions import AnalysisBackendError, NoStatementLoaded

logger = logging.getLogger(__name__)


class AnalyzeQueryUseCase:
    """Use case for answering statement queries"""
    
    def __init__(
        self,
        backend: IAnalysisBackend,
        analyzer: IAnalysisContextProvider,
        timeout_seconds: float = 30.0
    ):
        """Initialize use case with dependencies"""
        
        self.backend = backend
        self.analyzer = analyzer
        self.timeout_seconds = timeout_seconds
    
    async def execute(self, query: AnalysisQuery, statement: Optional[Statement]) -> AnalysisResponse:
        """
        Answer a query
        
        Args:
            query: User query
            statement: Currently loaded statement, None if nothing is loaded
            
        Returns:
            Backend response, or a labeled failure response if the backend
            errored or timed out
            
        Raises:
            NoStatementLoaded: If statement is None
        """
        if statement is None:
            raise NoStatementLoaded()
        
        context = self.analyzer.build_context(query.query, statement)
        
        try:
            return await asyncio.wait_for(
                self.backend.respond(context),
                timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning("%s backend timed out after %ss", self.backend.name, self.timeout_seconds)
            return self._failure("timeout", f"the {self.backend.name} backend did not respond in time")
        except AnalysisBackendError as e:
            logger.error("%s backend failed: %s", self.backend.name, e)
            return self._failure(e.reason, str(e))
    
    @staticmethod
    def _failure(reason: str, detail: str) -> AnalysisResponse:
        return AnalysisResponse(
            response=f"Analysis unavailable: {detail}",
            insights=["The analysis service could not answer this query. Please try again shortly."],
            error=reason
        )
