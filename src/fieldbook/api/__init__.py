"""API module for Fieldbook.

HTTP layer only: binds request parameters, calls the repository,
and shapes JSON responses. All SQL lives in fieldbook.db.repo.
"""
