"""Main application entry point for the FastAPI application.

Run with ``uvicorn gatekeeper.main:app``.
"""

from gatekeeper.core.application import create_application

app = create_application()
