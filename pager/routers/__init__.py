"""Routers package — HTTP endpoint definitions.

Files:
  users.py — REFERENCE paginated list router (copy when adding list endpoints)
"""
