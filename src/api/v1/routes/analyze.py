"""
API Routes: Analyze Query
"""

from fastapi import APIRouter, HTTPException, Depends

from api.v1.schemas import AnalyzeRequest, AnalyzeResponse
from api.v1.dependencies import get_analyze_use_case, get_session
from application.session import StatementSession
from application.use_cases.analyze_query import AnalyzeQueryUseCase
from domain.entities.analysis import AnalysisQuery
from domain.exceptions import NoStatementLoaded


router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_query(
    request: AnalyzeRequest,
    session: StatementSession = Depends(get_session),
    use_case: AnalyzeQueryUseCase = Depends(get_analyze_use_case)
):
    """
    Answer a free-text question about the loaded statement
    
    Queries mentioning spending/expense, income or budget get a detailed
    breakdown; anything else gets a general overview.
    """
    
    try:
        result = await use_case.execute(AnalysisQuery(query=request.query), session.current)
    except NoStatementLoaded as e:
        raise HTTPException(status_code=409, detail=str(e))
    
    return AnalyzeResponse(**result.to_dict())
