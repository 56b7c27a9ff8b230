"""API module for VAMOS.

API layer boundary:
- Validates inputs, reads the source catalog
- Returns payloads for the mixer UI
- Forbidden: catalog writes
"""
