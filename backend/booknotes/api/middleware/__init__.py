"""
API Middleware

Components:
===========
- error_handler: Maps exceptions to the JSON error envelope
- request_context: Binds a request id into the logging context

Usage:
======
    from booknotes.api.middleware import setup_exception_handlers, setup_request_context

    app = FastAPI()
    setup_request_context(app)
    setup_exception_handlers(app)
"""

from booknotes.api.middleware.error_handler import setup_exception_handlers
from booknotes.api.middleware.request_context import setup_request_context

__all__ = [
    "setup_exception_handlers",
    "setup_request_context",
]
