"""
Port: Statement Store Interface
Defines contract for persisting the single current statement (local, S3, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional
from domain.entities.statement import Statement


CURRENT_STATEMENT_KEY = "current_statement"


class IStatementStore(ABC):
    """Interface for single-slot statement persistence"""
    
    @abstractmethod
    async def save(self, statement: Statement) -> None:
        """
        Save statement into the current-statement slot, replacing any previous one
        
        Raises:
            PersistenceError: If the write fails
        """
        pass
    
    @abstractmethod
    async def load(self) -> Optional[Statement]:
        """
        Load the saved statement
        
        Returns:
            Statement, or None if nothing is saved
            
        Raises:
            PersistenceError: If the read fails or stored content is corrupt
        """
        pass
    
    @abstractmethod
    async def clear(self) -> None:
        """
        Remove the saved statement (no-op when nothing is saved)
        
        Raises:
            PersistenceError: If the delete fails
        """
        pass
