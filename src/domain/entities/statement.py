"""
Domain Entity: Statement
Represents one parsed bank statement
"""

from dataclasses import dataclass, field
from typing import Any, Optional
from .transaction import TransactionRow


DATE_NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class Statement:
    """
    Bank statement entity
    
    Rows keep the order they were provided in. ``total`` is the closing
    balance supplied by the ingestion source, never derived from rows.
    """
    
    rows: tuple[TransactionRow, ...] = field(default_factory=tuple)
    total: float = 0.0
    file_name: str = ""
    
    def __post_init__(self):
        # Accept any iterable of rows but store an immutable tuple
        object.__setattr__(self, "rows", tuple(self.rows))
    
    @property
    def transaction_count(self) -> int:
        return len(self.rows)
    
    @property
    def first_date(self) -> str:
        return self.rows[0].date if self.rows else DATE_NOT_AVAILABLE
    
    @property
    def last_date(self) -> str:
        return self.rows[-1].date if self.rows else DATE_NOT_AVAILABLE
    
    def get_credit_transactions(self) -> list[TransactionRow]:
        """Get all credit (income) rows"""
        return [r for r in self.rows if r.is_credit]
    
    def to_dict(self) -> dict:
        """Convert to dictionary (persistence and API wire format)"""
        return {
            "rows": [r.to_dict() for r in self.rows],
            "total": self.total,
            "file_name": self.file_name
        }
    
    @classmethod
    def from_dict(cls, data: dict[str, Any], file_name: Optional[str] = None) -> "Statement":
        """
        Build a statement from its wire representation
        
        Args:
            data: Dict with ``rows``, ``total`` and ``file_name``
            file_name: Overrides the stored file name when given
            
        Raises:
            KeyError, TypeError, ValueError: If the payload is malformed
        """
        if not isinstance(data, dict):
            raise TypeError(f"statement must be an object, got {type(data).__name__}")

        rows = data.get("rows", [])
        if not isinstance(rows, list):
            raise TypeError("'rows' must be a list")
        
        return cls(
            rows=tuple(TransactionRow.from_dict(r) for r in rows),
            total=float(data.get("total", 0.0)),
            file_name=file_name or str(data.get("file_name", ""))
        )
