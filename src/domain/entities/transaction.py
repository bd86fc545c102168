"""
Domain Entity: TransactionRow
Represents a single ledger line of a bank statement
"""

from dataclasses import dataclass
from typing import Any, Optional


UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class TransactionRow:
    """Bank transaction entity (positive amount = inflow, negative = outflow)"""
    
    date: str
    description: str
    amount: float
    category: Optional[str] = None
    
    @property
    def category_label(self) -> str:
        """Category used for grouping, 'Uncategorized' when absent"""
        return self.category or UNCATEGORIZED
    
    @property
    def is_credit(self) -> bool:
        return self.amount > 0
    
    @property
    def is_debit(self) -> bool:
        return self.amount < 0
    
    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "date": self.date,
            "description": self.description,
            "amount": self.amount,
            "category": self.category
        }
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransactionRow":
        """
        Build a row from its wire representation
        
        Raises:
            KeyError: If a required field is missing
            TypeError: If data is not a mapping
            ValueError: If amount is not numeric
        """
        if not isinstance(data, dict):
            raise TypeError(f"transaction must be an object, got {type(data).__name__}")

        category = data.get("category")
        return cls(
            date=str(data["date"]),
            description=str(data["description"]),
            amount=float(data["amount"]),
            category=str(category) if category else None
        )
