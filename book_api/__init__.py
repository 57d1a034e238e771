"""
FastAPI REST API for the in-memory book catalog.

This module provides:
- A thread-safe in-memory book store guarded by a read-write lock
- Collection and item endpoints for creating, reading, updating and deleting books
- Shared-secret API key authentication
"""
