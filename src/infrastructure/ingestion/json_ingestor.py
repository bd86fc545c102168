"""
Infrastructure Adapter: JSON Statement Ingestor
Implements IStatementIngestor for statements exported as JSON
"""

import json
from pathlib import Path
from typing import Optional

from application.ports.statement_ingestor import IStatementIngestor
from domain.entities.statement import Statement
from domain.exceptions import IngestionError


class JsonStatementIngestor(IStatementIngestor):
    """Reads ``{"rows": [...], "total": ..., "file_name": ...}`` files"""
    
    async def ingest(self, file_path: str, file_name: Optional[str] = None) -> Statement:
        name = file_name or Path(file_path).name
        
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise IngestionError(f"Cannot read {name}: {e}")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise IngestionError(f"{name} is not valid JSON: {e}")
        
        if not isinstance(data, dict):
            raise IngestionError(f"{name} must contain a JSON object")
        
        try:
            return Statement.from_dict(data, file_name=name)
        except KeyError as e:
            raise IngestionError(f"{name}: transaction is missing field {e}")
        except (TypeError, ValueError) as e:
            raise IngestionError(f"{name}: {e}")
