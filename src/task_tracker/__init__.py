"""
Task tracker backend package.

A FastAPI service over a volatile, thread-safe in-memory task repository.
The ASGI app lives at ``task_tracker.main:app``.
"""

__version__ = "0.1.0"
