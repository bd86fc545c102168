"""
Unit tests for the application use cases.

Tests the use cases with mocked dependencies to verify:
1. Queries without a loaded statement are rejected distinctly
2. Backend failures degrade to a labeled failure response
3. Persistence failures keep the statement in memory
"""
import asyncio
import inspect

import pytest
from unittest.mock import AsyncMock, MagicMock

from application.ports.analysis_backend import IAnalysisBackend
from application.ports.analysis_context import IAnalysisContextProvider
from application.session import StatementSession
from application.use_cases.analyze_query import AnalyzeQueryUseCase
from application.use_cases.load_statement import LoadStatementUseCase
from domain.entities.analysis import AnalysisQuery, AnalysisResponse
from domain.enums import Intent
from domain.exceptions import AnalysisBackendError, IngestionError, NoStatementLoaded, PersistenceError
from infrastructure.analysis.mock_backend import MockAnalysisBackend
from infrastructure.analysis.statement_analyzer import StatementAnalyzer


class SlowBackend(IAnalysisBackend):
    """Backend that never answers within the test timeout."""

    name = "slow"

    async def respond(self, context):
        await asyncio.sleep(5)
        return AnalysisResponse(response="too late")


class TestAnalyzeQueryUseCase:
    """Test AnalyzeQueryUseCase with mock and failing backends."""

    def test_execute_is_async(self):
        use_case = AnalyzeQueryUseCase(backend=MockAnalysisBackend(), analyzer=StatementAnalyzer())
        assert inspect.iscoroutinefunction(use_case.execute)

    @pytest.mark.asyncio
    async def test_execute_with_mock_backend(self, sample_statement):
        use_case = AnalyzeQueryUseCase(backend=MockAnalysisBackend(), analyzer=StatementAnalyzer())

        result = await use_case.execute(AnalysisQuery("What are my spending patterns?"), sample_statement)

        assert result.intent == Intent.SPENDING
        assert "135.25" in result.response
        assert not result.failed

    @pytest.mark.asyncio
    async def test_no_statement_loaded(self):
        use_case = AnalyzeQueryUseCase(backend=MockAnalysisBackend(), analyzer=StatementAnalyzer())

        with pytest.raises(NoStatementLoaded):
            await use_case.execute(AnalysisQuery("budget"), None)

    @pytest.mark.asyncio
    async def test_empty_statement_is_not_an_error(self, empty_statement):
        use_case = AnalyzeQueryUseCase(backend=MockAnalysisBackend(), analyzer=StatementAnalyzer())

        result = await use_case.execute(AnalysisQuery("budget help"), empty_statement)

        assert result.intent == Intent.BUDGET
        assert result.insights

    @pytest.mark.asyncio
    async def test_backend_receives_built_context(self, sample_statement):
        backend = MagicMock(spec=IAnalysisBackend)
        backend.name = "stub"
        backend.respond = AsyncMock(return_value=AnalysisResponse(response="hi", insights=["x"]))
        use_case = AnalyzeQueryUseCase(backend=backend, analyzer=StatementAnalyzer())

        result = await use_case.execute(AnalysisQuery("How is my income?"), sample_statement)

        assert result.response == "hi"
        context = backend.respond.call_args.args[0]
        assert context.query == "How is my income?"
        assert context.transaction_count == 3
        assert context.summary.total_income == pytest.approx(3000.0)

    @pytest.mark.asyncio
    async def test_context_comes_from_injected_provider(self, sample_statement):
        context = MagicMock()
        provider = MagicMock(spec=IAnalysisContextProvider)
        provider.build_context.return_value = context
        backend = MagicMock(spec=IAnalysisBackend)
        backend.name = "stub"
        backend.respond = AsyncMock(return_value=AnalysisResponse(response="ok"))
        use_case = AnalyzeQueryUseCase(backend=backend, analyzer=provider)

        await use_case.execute(AnalysisQuery("budget"), sample_statement)

        provider.build_context.assert_called_once_with("budget", sample_statement)
        backend.respond.assert_called_once_with(context)

    @pytest.mark.asyncio
    async def test_backend_error_degrades_to_failure_response(self, sample_statement):
        backend = MagicMock(spec=IAnalysisBackend)
        backend.name = "claude"
        backend.respond = AsyncMock(side_effect=AnalysisBackendError("Claude API error: 500"))
        use_case = AnalyzeQueryUseCase(backend=backend, analyzer=StatementAnalyzer())

        result = await use_case.execute(AnalysisQuery("spending"), sample_statement)

        assert result.failed
        assert result.error == "backend_error"
        assert result.response.startswith("Analysis unavailable:")
        assert "Claude API error" in result.response
        assert result.insights

    @pytest.mark.asyncio
    async def test_timeout_degrades_to_failure_response(self, sample_statement):
        use_case = AnalyzeQueryUseCase(backend=SlowBackend(), analyzer=StatementAnalyzer(), timeout_seconds=0.01)

        result = await use_case.execute(AnalysisQuery("spending"), sample_statement)

        assert result.error == "timeout"
        assert result.response.startswith("Analysis unavailable:")
        assert "135.25" not in result.response

    @pytest.mark.asyncio
    async def test_unexpected_backend_errors_propagate(self, sample_statement):
        backend = MagicMock(spec=IAnalysisBackend)
        backend.name = "broken"
        backend.respond = AsyncMock(side_effect=RuntimeError("bug"))
        use_case = AnalyzeQueryUseCase(backend=backend, analyzer=StatementAnalyzer())

        with pytest.raises(RuntimeError):
            await use_case.execute(AnalysisQuery("spending"), sample_statement)


class TestLoadStatementUseCase:
    """Test LoadStatementUseCase with mocked ingestor and store."""

    @pytest.fixture
    def mock_store(self):
        store = AsyncMock()
        store.load = AsyncMock(return_value=None)
        return store

    @pytest.fixture
    def mock_ingestor(self, sample_statement):
        ingestor = AsyncMock()
        ingestor.ingest = AsyncMock(return_value=sample_statement)
        return ingestor

    @pytest.mark.asyncio
    async def test_execute_loads_and_saves(self, mock_store, mock_ingestor, sample_statement):
        session = StatementSession()
        use_case = LoadStatementUseCase(store=mock_store, session=session)

        result = await use_case.execute(mock_ingestor, "/tmp/upload.pdf", "january.pdf")

        mock_ingestor.ingest.assert_called_once_with("/tmp/upload.pdf", "january.pdf")
        mock_store.save.assert_called_once_with(sample_statement)
        assert session.current is sample_statement
        assert result.persisted is True
        assert result.persistence_error is None

    @pytest.mark.asyncio
    async def test_persistence_failure_keeps_statement_in_memory(
        self, mock_store, mock_ingestor, sample_statement
    ):
        mock_store.save = AsyncMock(side_effect=PersistenceError("disk full"))
        session = StatementSession()
        use_case = LoadStatementUseCase(store=mock_store, session=session)

        result = await use_case.execute(mock_ingestor, "/tmp/upload.pdf")

        assert session.current is sample_statement
        assert result.persisted is False
        assert result.persistence_error == "disk full"

    @pytest.mark.asyncio
    async def test_ingestion_error_propagates_and_keeps_previous(self, mock_store, empty_statement):
        ingestor = AsyncMock()
        ingestor.ingest = AsyncMock(side_effect=IngestionError("bad file"))
        session = StatementSession(empty_statement)
        use_case = LoadStatementUseCase(store=mock_store, session=session)

        with pytest.raises(IngestionError):
            await use_case.execute(ingestor, "/tmp/bad.json")

        assert session.current is empty_statement
        mock_store.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_restore(self, mock_store, sample_statement):
        mock_store.load = AsyncMock(return_value=sample_statement)
        session = StatementSession()

        restored = await LoadStatementUseCase(store=mock_store, session=session).restore()

        assert restored is sample_statement
        assert session.current is sample_statement

    @pytest.mark.asyncio
    async def test_restore_nothing_saved(self, mock_store):
        session = StatementSession()

        assert await LoadStatementUseCase(store=mock_store, session=session).restore() is None
        assert not session.is_loaded

    @pytest.mark.asyncio
    async def test_restore_error_propagates(self, mock_store):
        mock_store.load = AsyncMock(side_effect=PersistenceError("corrupt"))

        with pytest.raises(PersistenceError):
            await LoadStatementUseCase(store=mock_store, session=StatementSession()).restore()

    @pytest.mark.asyncio
    async def test_clear(self, mock_store, sample_statement):
        session = StatementSession(sample_statement)

        await LoadStatementUseCase(store=mock_store, session=session).clear()

        assert not session.is_loaded
        mock_store.clear.assert_called_once()
