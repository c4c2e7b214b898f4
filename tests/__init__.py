# IdentityVault Test Suite
"""
Test suite including:
- Unit tests per module
- Integration tests (facade workflows, concurrency, logging)
- Security tests (wrong passwords, tampering, invalid keys)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
