"""
Infrastructure Adapter: Statement Summarizer
Aggregates income, expenses and category totals from a statement
"""

from collections import defaultdict

from domain.entities.statement import Statement
from domain.entities.statement_summary import StatementSummary


class StatementSummarizer:
    """Pure aggregation over statement rows"""
    
    RECENT_ROWS_LIMIT = 10
    
    def __init__(self, recent_rows_limit: int = RECENT_ROWS_LIMIT):
        self.recent_rows_limit = recent_rows_limit
    
    def summarize(self, statement: Statement) -> StatementSummary:
        """
        Summarize a statement
        
        Rows with a zero amount count toward neither income nor expenses
        but still register their category. ``recent_rows`` are the first
        rows in statement order, not sorted by date.
        
        Args:
            statement: Statement entity (rows may be empty)
            
        Returns:
            StatementSummary with all totals 0 for an empty statement
        """
        total_income = 0.0
        total_expenses = 0.0
        category_totals: dict[str, float] = defaultdict(float)
        expense_category_totals: dict[str, float] = defaultdict(float)
        
        for row in statement.rows:
            if row.is_credit:
                total_income += row.amount
            elif row.is_debit:
                total_expenses += abs(row.amount)
                expense_category_totals[row.category_label] += abs(row.amount)
            
            category_totals[row.category_label] += abs(row.amount)
        
        return StatementSummary(
            total_income=total_income,
            total_expenses=total_expenses,
            net_cash_flow=total_income - total_expenses,
            category_totals=dict(category_totals),
            expense_category_totals=dict(expense_category_totals),
            recent_rows=statement.rows[:self.recent_rows_limit]
        )
