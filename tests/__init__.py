"""
Test suite for the industrial inventory engine.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_production_engine.py -v
"""
