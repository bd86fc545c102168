"""
Infrastructure Adapter: Query Router
Keyword-based intent classification and generator dispatch
"""

from typing import Optional
import logging

from domain.entities.analysis import AnalysisContext, AnalysisResponse
from domain.enums import Intent
from .response_generators import (
    ResponseGenerator,
    SpendingResponseGenerator,
    IncomeResponseGenerator,
    BudgetResponseGenerator,
    GenericResponseGenerator
)

logger = logging.getLogger(__name__)


class QueryRouter:
    """
    Classify a query by case-insensitive keyword match and dispatch it.

    Rules are checked in order and the first match wins, so a query
    mentioning both "income" and "budget" is an income query.
    """

    KEYWORD_RULES: list[tuple[tuple[str, ...], Intent]] = [
        (("spending", "expense"), Intent.SPENDING),
        (("income",), Intent.INCOME),
        (("budget",), Intent.BUDGET),
    ]

    def __init__(self, generators: Optional[dict[Intent, ResponseGenerator]] = None):
        self.generators = generators or {
            Intent.SPENDING: SpendingResponseGenerator(),
            Intent.INCOME: IncomeResponseGenerator(),
            Intent.BUDGET: BudgetResponseGenerator(),
            Intent.GENERIC: GenericResponseGenerator(),
        }

    def classify(self, query: str) -> Intent:
        """Return the intent of a free-text query"""
        query_lower = query.lower()

        for keywords, intent in self.KEYWORD_RULES:
            if any(keyword in query_lower for keyword in keywords):
                return intent

        return Intent.GENERIC

    def route(self, context: AnalysisContext) -> AnalysisResponse:
        """Classify the context's query and run the matching generator"""
        intent = self.classify(context.query)
        generator = self.generators.get(intent) or self.generators[Intent.GENERIC]

        logger.info("Routing query to %s generator", intent)
        return generator.generate(context.query, context.statement, context.summary)
