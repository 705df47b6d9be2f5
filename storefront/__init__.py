"""Storefront : API boutiques + pages publiques (FastAPI + SQLite)."""
