"""
Pytest configuration and shared fixtures.
"""
import sys
from pathlib import Path
import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from domain.entities.statement import Statement
from domain.entities.transaction import TransactionRow


@pytest.fixture
def sample_rows() -> list[TransactionRow]:
    """Three-row demo ledger: two expenses and a salary deposit."""
    return [
        TransactionRow(date="2024-01-15", description="Grocery Store", amount=-89.50, category="Food"),
        TransactionRow(date="2024-01-16", description="Salary Deposit", amount=3000.00, category="Income"),
        TransactionRow(date="2024-01-17", description="Gas Station", amount=-45.75, category="Transport"),
    ]


@pytest.fixture
def sample_statement(sample_rows) -> Statement:
    """Demo statement with a closing balance of 2864.75."""
    return Statement(rows=tuple(sample_rows), total=2864.75, file_name="january.pdf")


@pytest.fixture
def empty_statement() -> Statement:
    """Statement with no rows."""
    return Statement(rows=(), total=0.0, file_name="empty.json")


@pytest.fixture
def sample_statement_payload(sample_statement) -> dict:
    """Wire representation of the demo statement."""
    return sample_statement.to_dict()
