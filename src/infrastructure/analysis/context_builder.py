"""
Infrastructure Adapter: Context Builder
Combines a statement, its summary and a query into one structured record
"""

from domain.entities.analysis import AnalysisContext
from domain.entities.statement import Statement
from domain.entities.statement_summary import StatementSummary
from .prompts import create_prompt


class ContextBuilder:
    """Builds the context consumed by every analysis backend"""
    
    def build(self, statement: Statement, summary: StatementSummary, query: str) -> AnalysisContext:
        """
        Build the structured context for a query
        
        Dates are "N/A" when the statement has no rows.
        """
        return AnalysisContext(
            file_name=statement.file_name,
            total=statement.total,
            transaction_count=statement.transaction_count,
            first_date=statement.first_date,
            last_date=statement.last_date,
            summary=summary,
            query=query,
            statement=statement
        )
    
    def render_prompt(self, context: AnalysisContext, include_format: bool = False) -> str:
        """Render the context as a language-model prompt"""
        return create_prompt(context, include_format=include_format)
