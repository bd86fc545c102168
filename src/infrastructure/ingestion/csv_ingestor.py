"""
Infrastructure Adapter: CSV Statement Ingestor
Implements IStatementIngestor for CSV exports

Expected header: date,description,amount[,category][,balance]
"""

import csv
from pathlib import Path
from typing import Optional

from application.ports.statement_ingestor import IStatementIngestor
from domain.entities.statement import Statement
from domain.entities.transaction import TransactionRow
from domain.exceptions import IngestionError


class CsvStatementIngestor(IStatementIngestor):
    """CSV ingestion with optional category and running balance columns"""
    
    REQUIRED_COLUMNS = ("date", "description", "amount")
    
    async def ingest(self, file_path: str, file_name: Optional[str] = None) -> Statement:
        name = file_name or Path(file_path).name
        
        try:
            with open(file_path, 'r', newline='', encoding='utf-8-sig') as csvfile:
                reader = csv.DictReader(csvfile)
                columns = [c.strip().lower() for c in (reader.fieldnames or [])]
                
                missing = [c for c in self.REQUIRED_COLUMNS if c not in columns]
                if missing:
                    raise IngestionError(f"{name}: missing column(s) {', '.join(missing)}")
                
                records = [
                    {k.strip().lower(): (v or "").strip() for k, v in record.items() if k}
                    for record in reader
                ]
        except OSError as e:
            raise IngestionError(f"Cannot read {name}: {e}")
        except (csv.Error, UnicodeDecodeError) as e:
            raise IngestionError(f"{name} is not a valid CSV file: {e}")
        
        rows = []
        last_balance = None
        for line_number, record in enumerate(records, start=2):
            try:
                amount = self._parse_amount(record["amount"])
                if record.get("balance"):
                    last_balance = self._parse_amount(record["balance"])
            except ValueError:
                raise IngestionError(f"{name} line {line_number}: invalid amount")
            
            rows.append(TransactionRow(
                date=record["date"],
                description=record["description"],
                amount=amount,
                category=record.get("category") or None
            ))
        
        total = last_balance if last_balance is not None else sum(r.amount for r in rows)
        
        return Statement(rows=tuple(rows), total=total, file_name=name)
    
    @staticmethod
    def _parse_amount(value: str) -> float:
        """Parse '1,234.56', '$-45.75' or '(45.75)' into a float"""
        cleaned = value.replace(",", "").replace("$", "").strip()
        if cleaned.startswith("(") and cleaned.endswith(")"):
            cleaned = "-" + cleaned[1:-1]
        return float(cleaned)
