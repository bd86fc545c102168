"""
Statement Session
Caller-owned holder of the currently loaded statement
"""

from typing import Optional

from domain.entities.statement import Statement
from domain.exceptions import NoStatementLoaded


class StatementSession:
    """
    Holds at most one statement. Loading replaces it wholesale.
    
    One session is created per caller (API app, CLI invocation, test) and
    passed explicitly to whatever needs the current statement.
    """
    
    def __init__(self, statement: Optional[Statement] = None):
        self._statement = statement
    
    @property
    def current(self) -> Optional[Statement]:
        return self._statement
    
    @property
    def is_loaded(self) -> bool:
        return self._statement is not None
    
    def load(self, statement: Statement) -> None:
        self._statement = statement
    
    def clear(self) -> None:
        self._statement = None
    
    def require(self) -> Statement:
        """Return the current statement or raise NoStatementLoaded"""
        if self._statement is None:
            raise NoStatementLoaded()
        return self._statement
