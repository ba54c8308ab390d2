"""
Animal API: Middleware Package
==============================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    Responses travel back the other way, so the logging middleware sees the
    final status code and the request ID middleware sets X-Request-ID last.
"""
