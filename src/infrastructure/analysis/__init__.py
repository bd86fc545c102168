"""
Statement analysis: summarizer, context builder, query router and backends
"""
from .summarizer import StatementSummarizer
from .context_builder import ContextBuilder
from .query_router import QueryRouter
from .statement_analyzer import StatementAnalyzer
from .mock_backend import MockAnalysisBackend

__all__ = [
    'StatementSummarizer',
    'ContextBuilder',
    'QueryRouter',
    'StatementAnalyzer',
    'MockAnalysisBackend',
]
