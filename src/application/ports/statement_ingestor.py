"""
Port: Statement Ingestor Interface
Defines contract for turning an uploaded file into a Statement
"""

from abc import ABC, abstractmethod
from typing import Optional
from domain.entities.statement import Statement


class IStatementIngestor(ABC):
    """Interface for statement ingestion"""
    
    @abstractmethod
    async def ingest(self, file_path: str, file_name: Optional[str] = None) -> Statement:
        """
        Read a statement file
        
        Args:
            file_path: Path to the uploaded file
            file_name: Original file name (defaults to the path's name)
            
        Returns:
            Statement entity
            
        Raises:
            IngestionError: If the file is unreadable or malformed
        """
        pass
