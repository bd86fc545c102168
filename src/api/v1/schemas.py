"""
API Schemas: Pydantic models for request/response validation
"""

from typing import Optional, List, Dict
from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request schema for analyze endpoint"""
    
    query: str = Field(..., min_length=1, description="Free-text question about the loaded statement")


class AnalyzeResponse(BaseModel):
    """Response schema for analyze endpoint"""
    
    response: str
    insights: List[str] = Field(default_factory=list, description="Most salient first")
    intent: Optional[str] = Field(None, description="spending, income, budget or generic")
    error: Optional[str] = Field(None, description="Set when the analysis backend failed")


class TransactionRowSchema(BaseModel):
    """Transaction schema"""
    
    date: str
    description: str
    amount: float
    category: Optional[str] = None


class StatementSchema(BaseModel):
    """Statement schema"""
    
    file_name: str
    total: float
    rows: List[TransactionRowSchema]


class SummarySchema(BaseModel):
    """Statement summary schema"""
    
    total_income: float
    total_expenses: float
    net_cash_flow: float
    category_totals: Dict[str, float]
    expense_category_totals: Dict[str, float]
    recent_rows: List[TransactionRowSchema]


class StatementOverviewSchema(BaseModel):
    """Short description of a loaded statement"""
    
    file_name: str
    total: float
    transaction_count: int
    first_date: str
    last_date: str


class UploadResponse(BaseModel):
    """Response schema for statement upload"""
    
    success: bool
    statement: StatementOverviewSchema
    persisted: bool
    persistence_error: Optional[str] = None


class CurrentStatementResponse(BaseModel):
    """Response schema for the current statement"""
    
    statement: StatementSchema
    summary: SummarySchema


class ClearResponse(BaseModel):
    """Response schema for clearing the current statement"""
    
    success: bool
    cleared: bool


class HealthResponse(BaseModel):
    """Health check response"""
    
    status: str
    service: str
    version: str
    storage_type: str
    analysis_backend: str
    statement_loaded: bool
