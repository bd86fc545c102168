"""
Infrastructure Adapter: Statement Analyzer
Single-call analysis: context, intent classification, response generation
"""

from typing import Optional
import logging

from application.ports.analysis_context import IAnalysisContextProvider
from domain.entities.analysis import AnalysisContext, AnalysisQuery, AnalysisResponse
from domain.entities.statement import Statement
from .summarizer import StatementSummarizer
from .context_builder import ContextBuilder
from .query_router import QueryRouter

logger = logging.getLogger(__name__)


class StatementAnalyzer(IAnalysisContextProvider):
    """Answers queries about a statement with the keyword router"""

    def __init__(
        self,
        summarizer: Optional[StatementSummarizer] = None,
        context_builder: Optional[ContextBuilder] = None,
        router: Optional[QueryRouter] = None
    ):
        self.summarizer = summarizer or StatementSummarizer()
        self.context_builder = context_builder or ContextBuilder()
        self.router = router or QueryRouter()

    def build_context(self, query: str, statement: Statement) -> AnalysisContext:
        """Summarize the statement and build the query context"""
        summary = self.summarizer.summarize(statement)
        context = self.context_builder.build(statement, summary, query)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Analysis prompt:\n%s", self.context_builder.render_prompt(context))

        return context

    def analyze(self, query: AnalysisQuery, statement: Statement) -> AnalysisResponse:
        """
        Analyze a statement for a query

        Args:
            query: Free-text query
            statement: Statement to analyze (rows may be empty)

        Returns:
            AnalysisResponse from the generator matching the query intent
        """
        context = self.build_context(query.query, statement)
        return self.router.route(context)
