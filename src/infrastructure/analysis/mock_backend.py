"""
Infrastructure Adapter: Mock Analysis Backend
Implements IAnalysisBackend with the keyword router and template generators
"""

from typing import Optional

from application.ports.analysis_backend import IAnalysisBackend
from domain.entities.analysis import AnalysisContext, AnalysisResponse
from .query_router import QueryRouter


class MockAnalysisBackend(IAnalysisBackend):
    """Deterministic backend, no network access"""

    name = "mock"

    def __init__(self, router: Optional[QueryRouter] = None):
        self.router = router or QueryRouter()

    async def respond(self, context: AnalysisContext) -> AnalysisResponse:
        return self.router.route(context)
