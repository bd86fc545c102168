"""
Domain Entities: Analysis query, context and response
"""

from dataclasses import dataclass, field
from typing import Optional

from .statement import Statement
from .statement_summary import StatementSummary
from ..enums import Intent


@dataclass(frozen=True)
class AnalysisQuery:
    """Free-text question about the loaded statement"""
    
    query: str


@dataclass(frozen=True)
class AnalysisContext:
    """
    Everything relevant to answering one query
    
    Built before any response is phrased so that the mock generators and a
    language-model backend consume the same record.
    """
    
    file_name: str
    total: float
    transaction_count: int
    first_date: str
    last_date: str
    summary: StatementSummary
    query: str
    statement: Statement
    
    def to_dict(self) -> dict:
        """Convert to dictionary (statement rows omitted, see summary)"""
        return {
            "file_name": self.file_name,
            "total": self.total,
            "transaction_count": self.transaction_count,
            "date_range": {"start": self.first_date, "end": self.last_date},
            "summary": self.summary.to_dict(),
            "query": self.query
        }


@dataclass(frozen=True)
class AnalysisResponse:
    """Response prose plus insights ordered by salience"""
    
    response: str
    insights: list[str] = field(default_factory=list)
    intent: Optional[Intent] = None
    error: Optional[str] = None
    
    @property
    def failed(self) -> bool:
        return self.error is not None
    
    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "response": self.response,
            "insights": list(self.insights),
            "intent": self.intent.value if self.intent else None,
            "error": self.error
        }
