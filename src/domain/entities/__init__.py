"""
Domain entities
"""
from .transaction import TransactionRow, UNCATEGORIZED
from .statement import Statement, DATE_NOT_AVAILABLE
from .statement_summary import StatementSummary
from .analysis import AnalysisQuery, AnalysisContext, AnalysisResponse

__all__ = [
    'TransactionRow',
    'UNCATEGORIZED',
    'Statement',
    'DATE_NOT_AVAILABLE',
    'StatementSummary',
    'AnalysisQuery',
    'AnalysisContext',
    'AnalysisResponse',
]
