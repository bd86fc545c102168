"""
Domain Exceptions
Error taxonomy shared by the ingestion, persistence and analysis boundaries
"""


class StatementAnalyzerError(Exception):
    """Base class for all application errors"""


class IngestionError(StatementAnalyzerError):
    """Uploaded statement file is unreadable, malformed or unsupported"""


class PersistenceError(StatementAnalyzerError):
    """Reading or writing the saved statement failed"""


class NoStatementLoaded(StatementAnalyzerError):
    """A query was submitted while no statement is loaded"""
    
    def __init__(self, message: str = "No statement loaded. Upload a statement first."):
        super().__init__(message)


class AnalysisBackendError(StatementAnalyzerError):
    """Analysis backend failed (network, timeout or invalid response)"""
    
    def __init__(self, message: str, reason: str = "backend_error"):
        super().__init__(message)
        self.reason = reason
