"""
Application Use Cases: Load, restore and clear the current statement
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.ports.statement_ingestor import IStatementIngestor
from application.ports.statement_store import IStatementStore
from application.session import StatementSession
from domain.entities.statement import Statement
from domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a statement"""
    
    statement: Statement
    persisted: bool
    persistence_error: Optional[str] = None


class LoadStatementUseCase:
    """Ingests statements into a session and keeps the store in sync"""
    
    def __init__(self, store: IStatementStore, session: StatementSession):
        """Initialize use case with dependencies"""
        
        self.store = store
        self.session = session
    
    async def execute(
        self,
        ingestor: IStatementIngestor,
        file_path: str,
        file_name: Optional[str] = None
    ) -> LoadResult:
        """
        Ingest a statement file and make it the current statement
        
        IngestionError propagates and leaves the session untouched. A
        failed save keeps the statement in memory only.
        """
        statement = await ingestor.ingest(file_path, file_name)
        self.session.load(statement)
        logger.info("Loaded statement %s (%d rows)", statement.file_name, statement.transaction_count)
        
        try:
            await self.store.save(statement)
        except PersistenceError as e:
            logger.warning("Statement kept in memory only: %s", e)
            return LoadResult(statement=statement, persisted=False, persistence_error=str(e))
        
        return LoadResult(statement=statement, persisted=True)
    
    async def restore(self) -> Optional[Statement]:
        """
        Load the saved statement into the session
        
        Raises:
            PersistenceError: If the store cannot be read
        """
        statement = await self.store.load()
        if statement is not None:
            self.session.load(statement)
            logger.info("Restored statement %s", statement.file_name)
        return statement
    
    async def clear(self) -> None:
        """
        Clear session and store
        
        Raises:
            PersistenceError: If the store cannot be cleared (session is still cleared)
        """
        self.session.clear()
        await self.store.clear()
