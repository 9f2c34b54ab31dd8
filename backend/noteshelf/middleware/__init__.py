"""
NoteShelf Backend: Middleware Package
=====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every later log line can carry it
    - Logging captures response status and duration on the way out
"""
