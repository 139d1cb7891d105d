"""Pydantic schemas package.

Folder intent:
  common.py — HealthResponse + UserOut for the reference application
"""
