"""Test suite for the block event adapter.

Test organization:
- fixtures/: Sample markup and event builders
- unit/: Unit tests for individual modules

Run tests with:
    pytest tests/
    pytest tests/unit/ -v --tb=short
"""
