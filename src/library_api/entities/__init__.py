"""Entities organized by resource rather than technical layer.

Each resource has its own package containing:
- entity.py: record model exchanged with clients
- table.py: database persistence model
- repository.py: SQL-backed record store
"""
