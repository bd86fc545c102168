"""
Port: Analysis Context Provider Interface
Defines contract for turning a query and a statement into backend context
"""

from abc import ABC, abstractmethod
from domain.entities.analysis import AnalysisContext
from domain.entities.statement import Statement


class IAnalysisContextProvider(ABC):
    """Interface for building the context every analysis backend consumes"""
    
    @abstractmethod
    def build_context(self, query: str, statement: Statement) -> AnalysisContext:
        """
        Summarize the statement and combine it with the query
        
        Args:
            query: Free-text query
            statement: Loaded statement (rows may be empty)
            
        Returns:
            AnalysisContext for the query
        """
        pass
