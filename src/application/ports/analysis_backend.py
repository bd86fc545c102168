"""
Port: Analysis Backend Interface
Defines contract for answering a query from its structured context
"""

from abc import ABC, abstractmethod
from domain.entities.analysis import AnalysisContext, AnalysisResponse


class IAnalysisBackend(ABC):
    """Interface for analysis backends (mock generators, language models)"""
    
    name: str = "unknown"
    
    @abstractmethod
    async def respond(self, context: AnalysisContext) -> AnalysisResponse:
        """
        Classify the query in ``context`` and produce a response
        
        Args:
            context: Structured context built for the query
            
        Returns:
            AnalysisResponse with response text and ordered insights
            
        Raises:
            AnalysisBackendError: On network, timeout or invalid-response failures
        """
        pass
