"""
Domain Entity: Statement Summary
Aggregate figures derived from a statement
"""

from dataclasses import dataclass, field
from .transaction import TransactionRow


def _ranked(totals: dict[str, float]) -> list[tuple[str, float]]:
    return sorted(totals.items(), key=lambda item: (-item[1], item[0]))


@dataclass(frozen=True)
class StatementSummary:
    """
    Income/expense totals, per-category totals and recent rows

    ``category_totals`` accumulates the absolute amount of every row.
    ``expense_category_totals`` only accumulates outflows.
    """

    total_income: float = 0.0
    total_expenses: float = 0.0
    net_cash_flow: float = 0.0
    category_totals: dict[str, float] = field(default_factory=dict)
    expense_category_totals: dict[str, float] = field(default_factory=dict)
    recent_rows: tuple[TransactionRow, ...] = field(default_factory=tuple)

    def sorted_categories(self) -> list[tuple[str, float]]:
        """Categories by descending total, ties broken by label"""
        return _ranked(self.category_totals)

    def sorted_expense_categories(self) -> list[tuple[str, float]]:
        """Expense categories by descending total, ties broken by label"""
        return _ranked(self.expense_category_totals)

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "net_cash_flow": self.net_cash_flow,
            "category_totals": dict(self.sorted_categories()),
            "expense_category_totals": dict(self.sorted_expense_categories()),
            "recent_rows": [r.to_dict() for r in self.recent_rows]
        }
