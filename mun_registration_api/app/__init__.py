"""
Application package.

The project is organised into layers: ``core`` (configuration, database,
security, errors), ``schemas`` (Pydantic payloads), ``services``
(committee catalog, registration store and business rules) and ``api``
(FastAPI routers).
"""

from .main import app  # noqa: F401
