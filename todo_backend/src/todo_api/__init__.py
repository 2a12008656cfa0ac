"""
Todo Service package.

A FastAPI application serving CRUD operations over an in-memory todo store.
The ASGI app is importable as ``todo_api.main:app``; ``todo_api.main.create_app``
builds independent instances around their own store.
"""

__version__ = "1.0.0"
