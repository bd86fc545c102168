"""
Infrastructure Adapter: Response Generators
One generator per query intent, each filling a response template from
computed statement figures
"""

from abc import ABC, abstractmethod

from domain.entities.analysis import AnalysisResponse
from domain.entities.statement import Statement
from domain.entities.statement_summary import StatementSummary
from domain.enums import Intent


class ResponseGenerator(ABC):
    """Base class for intent response generators"""

    intent: Intent = Intent.GENERIC

    @abstractmethod
    def generate(
        self,
        query: str,
        statement: Statement,
        summary: StatementSummary
    ) -> AnalysisResponse:
        """
        Produce response text and ordered insights

        Must not fail on an empty statement.
        """
        pass

    def _respond(self, response: str, insights: list[str]) -> AnalysisResponse:
        return AnalysisResponse(response=response, insights=insights, intent=self.intent)


def _share(part: float, whole: float) -> float:
    """Percentage of ``part`` in ``whole``, 0 when whole is 0"""
    if whole == 0:
        return 0.0
    return part / whole * 100


class SpendingResponseGenerator(ResponseGenerator):
    """Total expenses and the largest spending categories"""

    intent = Intent.SPENDING
    TOP_CATEGORIES = 2

    def generate(self, query, statement, summary):
        categories = summary.sorted_expense_categories()[:self.TOP_CATEGORIES]
        response = f"Your total expenses are ${summary.total_expenses:.2f}."

        if not categories:
            return self._respond(response, [
                "No outgoing transactions found in this statement",
                "Upload a statement covering a full month for a spending breakdown"
            ])

        names = [name for name, _ in categories]
        if len(names) == 1:
            response += f" {names[0]} makes up the largest category."
        else:
            response += f" {names[0]} and {names[1]} make up the largest categories."

        insights = []
        for position, (name, total) in enumerate(categories):
            note = f"{_share(total, summary.total_expenses):.1f}% of spending"
            if position == 0:
                note += ", highest category"
            insights.append(f"{name} expenses: ${total:.2f} ({note})")

        insights.append(f"Consider setting a monthly limit for {names[0]} to reduce costs")

        return self._respond(response, insights)


class IncomeResponseGenerator(ResponseGenerator):
    """Total income, consistency and cash-flow observations"""

    intent = Intent.INCOME

    def generate(self, query, statement, summary):
        deposits = statement.get_credit_transactions()
        response = f"Your total income is ${summary.total_income:.2f}"

        if deposits:
            largest = max(deposits, key=lambda row: row.amount)
            response += f", primarily from {largest.description}."
            count = len(deposits)
            noun = "deposit" if count == 1 else "deposits"
            stream = f"Consistent income stream detected ({count} {noun})"
        else:
            response += "."
            stream = "No incoming deposits found in this statement"

        net = summary.net_cash_flow
        if net > 0:
            cash_flow = f"Good cash flow management: net cash flow of ${net:.2f}"
        elif net < 0:
            cash_flow = f"Expenses exceed income by ${abs(net):.2f}"
        else:
            cash_flow = "Income and expenses are balanced"

        return self._respond(response, [
            stream,
            cash_flow,
            "Consider diversifying income sources"
        ])


class BudgetResponseGenerator(ResponseGenerator):
    """50/30/20 needs/wants/savings framework"""

    intent = Intent.BUDGET

    # Categories treated as needs (lower-cased)
    NEEDS_CATEGORIES = {
        "food", "groceries", "transport", "utilities", "rent",
        "housing", "health", "insurance", "education"
    }

    STATIC_INSIGHTS = [
        "50% for needs (food, transport): Track essential costs against your income",
        "30% for wants: Consider tracking entertainment expenses",
        "20% for savings: Good opportunity to increase savings rate",
    ]

    def generate(self, query, statement, summary):
        response = "Based on your spending patterns, here's a budget analysis:"
        income = summary.total_income

        if income <= 0:
            return self._respond(response, list(self.STATIC_INSIGHTS))

        needs = sum(
            total for name, total in summary.expense_category_totals.items()
            if name.lower() in self.NEEDS_CATEGORIES
        )
        wants = summary.total_expenses - needs

        needs_share = _share(needs, income)
        wants_share = _share(wants, income)
        savings_share = _share(summary.net_cash_flow, income)

        return self._respond(response, [
            f"50% for needs (food, transport): Currently at {needs_share:.1f}%",
            f"30% for wants: Currently at {wants_share:.1f}%",
            f"20% for savings: Currently at {savings_share:.1f}%",
        ])


class GenericResponseGenerator(ResponseGenerator):
    """Fallback: echo the query with basic statement facts"""

    intent = Intent.GENERIC

    def generate(self, query, statement, summary):
        return self._respond(f"Financial analysis for: {query}", [
            f"Total transactions analyzed: {statement.transaction_count}",
            f"Current balance: ${statement.total:.2f}",
            "Use specific keywords like 'spending', 'income', or 'budget' for detailed analysis",
        ])
