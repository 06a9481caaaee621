"""
Notekeeper - personal notes backend

User signup/login with JWT bearer tokens and per-user note CRUD and
substring search, backed by a single SQLite database.
"""

__version__ = "1.0.0"
