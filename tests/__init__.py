"""
Test suite for the container tracking engine.

Run all tests: pytest
Run with coverage: pytest --cov=. --cov-report=html
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_reconciliation_service.py -v
"""
