"""
Test suite for BillBot Statement Analyzer.

Architecture: Hexagonal (Ports & Adapters)
Testing Strategy:
- Unit tests: Domain entities, summarizer, router and generators
- Integration tests: Use cases with mocked adapters, local store, ingestors
- API tests: FastAPI TestClient against the mock analysis backend
"""
