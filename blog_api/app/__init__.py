"""
Application package initializer.

The API is split into small layers: ``core`` holds configuration,
logging, error handling and the in‑memory store; ``schemas`` defines
request and response bodies; ``services`` contains the business logic;
and ``api`` exposes versioned routers built on top of the services.
"""

from .main import app  # noqa: F401
