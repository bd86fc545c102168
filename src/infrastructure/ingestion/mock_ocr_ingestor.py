"""
Infrastructure Adapter: Mock OCR Ingestor
Stands in for OCR on scanned statements (PDF, images)
"""

from pathlib import Path
from typing import Optional

from application.ports.statement_ingestor import IStatementIngestor
from domain.entities.statement import Statement
from domain.entities.transaction import TransactionRow
from domain.exceptions import IngestionError


DEMO_ROWS = (
    TransactionRow(date="2024-01-15", description="Grocery Store", amount=-89.50, category="Food"),
    TransactionRow(date="2024-01-16", description="Salary Deposit", amount=3000.00, category="Income"),
    TransactionRow(date="2024-01-17", description="Gas Station", amount=-45.75, category="Transport"),
)
DEMO_TOTAL = 2864.75


class MockOcrIngestor(IStatementIngestor):
    """Returns a fixed demo statement labelled with the uploaded file name"""
    
    async def ingest(self, file_path: str, file_name: Optional[str] = None) -> Statement:
        path = Path(file_path)
        if not path.is_file():
            raise IngestionError(f"Cannot read {file_name or path.name}: file not found")
        
        return Statement(rows=DEMO_ROWS, total=DEMO_TOTAL, file_name=file_name or path.name)
