"""
Statement ingestion adapters
"""
from pathlib import Path

from application.ports.statement_ingestor import IStatementIngestor
from domain.exceptions import IngestionError
from .json_ingestor import JsonStatementIngestor
from .csv_ingestor import CsvStatementIngestor
from .mock_ocr_ingestor import MockOcrIngestor


INGESTORS = {
    ".json": JsonStatementIngestor,
    ".csv": CsvStatementIngestor,
    ".pdf": MockOcrIngestor,
    ".png": MockOcrIngestor,
    ".jpg": MockOcrIngestor,
    ".jpeg": MockOcrIngestor,
}


def get_statement_ingestor(file_name: str) -> IStatementIngestor:
    """
    Pick an ingestor by file extension

    Raises:
        IngestionError: If the extension is not supported
    """
    suffix = Path(file_name).suffix.lower()
    ingestor_class = INGESTORS.get(suffix)

    if ingestor_class is None:
        supported = ", ".join(sorted(INGESTORS))
        raise IngestionError(f"Unsupported file type '{suffix or file_name}'. Supported: {supported}")

    return ingestor_class()


__all__ = [
    'JsonStatementIngestor',
    'CsvStatementIngestor',
    'MockOcrIngestor',
    'INGESTORS',
    'get_statement_ingestor',
]
