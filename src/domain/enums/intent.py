"""Query Intent Enumeration

Defines the kinds of question the analyzer can answer.
"""

from enum import Enum


class Intent(str, Enum):
    """Intent classification of a free-text query
    
    SPENDING: Expense totals and category breakdown
    INCOME: Income totals and cash-flow notes
    BUDGET: 50/30/20 budgeting framework
    GENERIC: Anything else
    """
    
    SPENDING = "spending"
    INCOME = "income"
    BUDGET = "budget"
    GENERIC = "generic"
    
    def __str__(self) -> str:
        return self.value
